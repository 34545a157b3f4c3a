"""Local embedders sized to the dimensions of common hosted embedding models."""

from __future__ import annotations

from typing import Sequence

OPENAI_DEFAULT_MODEL = "text-embedding-3-small"
COHERE_DEFAULT_MODEL = "embed-english-v3.0"
HUGGINGFACE_DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"

_OPENAI_DIMENSIONS = {"text-embedding-3-large": 3072}
_OPENAI_DEFAULT_DIMENSION = 1536
_COHERE_DIMENSIONS = {"embed-english-light-v3.0": 384}
_COHERE_DEFAULT_DIMENSION = 1024
_HUGGINGFACE_DIMENSIONS = {
    "sentence-transformers/all-mpnet-base-v2": 768,
    "sentence-transformers/paraphrase-multilingual-mpnet-base-v2": 768,
    "sentence-transformers/all-MiniLM-L6-v2": 384,
}
_HUGGINGFACE_DEFAULT_DIMENSION = 384


def _check(texts: Sequence[str]) -> None:
    if not texts:
        raise ValueError("empty texts slice")


def _zeros(texts: Sequence[str], dimension: int) -> list[list[float]]:
    _check(texts)
    return [[0.0] * dimension for _ in texts]


class _Sized:
    """Holds the model name and the vector length it implies."""

    def __init__(self, model: str, dimension: int) -> None:
        self.model = model
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        """Length of the vectors produced for the configured model."""
        return self._dimension


class OpenAIEmbedder(_Sized):
    """Embedder sized for OpenAI embedding models.

    Vectors are computed locally from the text's code points: each code
    point adds ``code / 256`` at its UTF-8 byte offset (modulo the
    dimension), and the result is divided by its sum of squares.
    """

    def __init__(self, api_key: str, model: str = OPENAI_DEFAULT_MODEL) -> None:
        super().__init__(model, _OPENAI_DIMENSIONS.get(model, _OPENAI_DEFAULT_DIMENSION))
        self.api_key = api_key

    def _vector(self, text: str) -> list[float]:
        vector = [0.0] * self._dimension
        offset = 0
        for ch in text:
            vector[offset % self._dimension] += ord(ch) / 256.0
            offset += len(ch.encode("utf-8", errors="surrogatepass"))
        magnitude = sum(v * v for v in vector)
        if magnitude > 0:
            scale = 1.0 / magnitude
            vector = [v * scale for v in vector]
        return vector

    def embed(self, text: str) -> list[float]:
        """Return the embedding of one text."""
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """Return one vector per text; an empty batch raises ValueError."""
        _check(texts)
        return [self._vector(text) for text in texts]


class CohereEmbedder(_Sized):
    """Embedder sized for Cohere embedding models; produces zero vectors."""

    def __init__(self, api_key: str, model: str = COHERE_DEFAULT_MODEL) -> None:
        super().__init__(model, _COHERE_DIMENSIONS.get(model, _COHERE_DEFAULT_DIMENSION))
        self.api_key = api_key

    def embed(self, text: str) -> list[float]:
        """Return the embedding of one text."""
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """Return one zero vector per text; an empty batch raises ValueError."""
        return _zeros(texts, self._dimension)


class HuggingFaceEmbedder(_Sized):
    """Embedder sized for sentence-transformers models; produces zero vectors."""

    def __init__(self, endpoint: str, api_key: str = "", model: str = HUGGINGFACE_DEFAULT_MODEL) -> None:
        super().__init__(model, _HUGGINGFACE_DIMENSIONS.get(model, _HUGGINGFACE_DEFAULT_DIMENSION))
        self.endpoint = endpoint
        self.api_key = api_key

    def embed(self, text: str) -> list[float]:
        """Return the embedding of one text."""
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """Return one zero vector per text; an empty batch raises ValueError."""
        return _zeros(texts, self._dimension)