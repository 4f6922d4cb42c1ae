"""POST /analyze: find the word least semantically similar to the rest of the set."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from oddword.config.logging import get_logger
from oddword.config.settings import Settings, get_settings
from oddword.controllers.schema.analyze import AnalyzeRequest, AnalyzeResponse, SimilarityItem
from oddword.services.analysis.errors import (
    AnalysisError,
    EmbeddingFailed,
    InsufficientUniqueWords,
    MalformedVector,
)
from oddword.services.analysis.pipeline import run_analysis
from oddword.services.embedder.base import BaseEmbeddingProvider
from oddword.services.embedder.preprocessing import clean_words, split_words

logger = get_logger(__name__)

router = APIRouter(prefix="/analyze", tags=["analysis"])


def get_embedding_provider(request: Request) -> BaseEmbeddingProvider:
    """Provider constructed at startup and owned by the application."""
    provider = getattr(request.app.state, "embedding_provider", None)
    if provider is None:
        raise HTTPException(status_code=503, detail="Embedding provider is not configured")
    return provider


def _error_response(exc: AnalysisError) -> JSONResponse:
    body: dict = {"detail": exc.message, "error_code": exc.error_code}
    if isinstance(exc, InsufficientUniqueWords):
        body["duplicates_removed"] = exc.duplicates_removed
    if isinstance(exc, EmbeddingFailed) and exc.word is not None:
        body["word"] = exc.word
    if isinstance(exc, MalformedVector):
        # Provider bug; details stay in the logs
        body["detail"] = "Embedding provider returned inconsistent vectors."
    return JSONResponse(content=body, status_code=exc.http_status)


@router.post("", response_model=AnalyzeResponse, response_model_by_alias=True)
async def analyze_words(
    body: AnalyzeRequest,
    provider: BaseEmbeddingProvider = Depends(get_embedding_provider),
    settings: Settings = Depends(get_settings),
):
    """
    Clean the input (trim, lower-case, drop empties), de-duplicate, embed every word
    concurrently, and return the odd word with a ranked similarity report.
    Invalid input maps to 400, provider failures to 502/503.
    """
    words = split_words(body.text) if body.text is not None else clean_words(body.words or [])
    try:
        result = await run_analysis(
            words,
            provider,
            min_words=settings.min_words,
            tie_epsilon=settings.tie_epsilon,
            max_words=settings.max_words,
        )
    except AnalysisError as e:
        if e.http_status >= 500:
            logger.warning("Analysis failed", extra={"error_code": e.error_code, "error": e.message})
        return _error_response(e)

    return AnalyzeResponse(
        odd_word=result.odd_word,
        explanation=result.explanation,
        similarities=[SimilarityItem(word=s.word, similarity=s.similarity) for s in result.similarities],
        duplicates_removed=list(result.duplicates_removed),
    )
