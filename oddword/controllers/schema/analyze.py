"""Request/response schemas for POST /analyze."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AnalyzeRequest(BaseModel):
    """POST /analyze request body. Provide either a word list or a raw comma-separated string."""

    words: list[str] | None = Field(default=None, max_length=1000, description="Words to compare")
    text: str | None = Field(
        default=None, max_length=20000, description="Comma-separated words, e.g. 'apple, banana, car'"
    )

    @model_validator(mode="after")
    def validate_words_or_text(self):
        """Ensure exactly one of words or text is provided."""
        if self.words is None and self.text is None:
            raise ValueError("Either words or text must be provided")
        if self.words is not None and self.text is not None:
            raise ValueError("Provide only one of words or text")
        return self


class SimilarityItem(BaseModel):
    """One word and its average similarity to the rest of the group."""

    word: str
    similarity: float


class AnalyzeResponse(BaseModel):
    """POST /analyze response body. similarities are sorted descending; the odd word comes last."""

    model_config = ConfigDict(populate_by_name=True)

    odd_word: str = Field(..., alias="oddWord")
    explanation: str
    similarities: list[SimilarityItem]
    duplicates_removed: list[str] = Field(default_factory=list, alias="duplicatesRemoved")
