"""Amazon Bedrock embedding strategy."""

import json

import boto3
from botocore.exceptions import ClientError

from oddword.config.embedding.models import EmbeddingConfig
from oddword.config.settings import get_settings
from oddword.services.embedder.base import BaseEmbeddingStrategy


class BedrockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Amazon Bedrock embeddings (Titan text embeddings v1/v2).
    Uses IAM credentials (profile/env/instance). Region from config.region or settings.aws_region.
    """

    def __init__(self) -> None:
        self._client = None

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    def load(self, config: EmbeddingConfig) -> None:
        region = config.region or get_settings().aws_region or None
        self._client = boto3.client("bedrock-runtime", region_name=region)

    def _embed_one(self, text: str, model_id: str) -> list[float]:
        body = json.dumps({"inputText": text})
        try:
            response = self._client.invoke_model(
                modelId=model_id,
                contentType="application/json",
                accept="application/json",
                body=body,
            )
        except ClientError as e:
            raise ValueError(f"Bedrock invoke_model failed: {e}") from e
        payload = json.loads(response["body"].read().decode("utf-8"))
        emb = payload.get("embedding")
        if emb is None:
            # Titan V2 can return embeddingsByType
            by_type = payload.get("embeddingsByType") or {}
            emb = by_type.get("float") or (next(iter(by_type.values()), None) if by_type else None)
        if not emb:
            raise ValueError("Bedrock response contained no embedding")
        return [float(x) for x in emb]

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        if self._client is None:
            self.load(config)
        return [self._embed_one(text, config.model) for text in texts]
