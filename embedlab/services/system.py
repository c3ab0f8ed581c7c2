"""
EmbeddingSystem: the context object that owns {dimension, vocabulary, table}
and exposes every public operation.

State is replaced as a whole by `initialize` or `import_model`. There is no
locking; concurrent writers must be serialized by the caller.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence
import warnings
import numpy as np

from ..core.config import settings
from ..core.exceptions import EmbeddingDimensionWarning, InvalidArgument
from ..core.logger import get_logger
from . import clustering, encoder, metrics, search, serialization
from .embeddings import EmbeddingTable
from .metrics import VectorLike
from .search import SearchResult
from .vocabulary import Vocabulary

DEFAULT_DIMENSION = 128

log = get_logger("system")

@dataclass(frozen=True)
class SystemInfo:
    vocabulary_size: int
    dimension: int
    is_initialized: bool

    def as_dict(self) -> Dict[str, object]:
        return {
            "vocabularySize": self.vocabulary_size,
            "dimension": self.dimension,
            "isInitialized": self.is_initialized,
        }

@dataclass(frozen=True)
class _State:
    dimension: int
    vocabulary: Vocabulary
    table: EmbeddingTable

def _empty_state(dimension: int) -> _State:
    return _State(dimension, Vocabulary(), EmbeddingTable(np.zeros((0, dimension))))

class EmbeddingSystem:
    def __init__(self, dimension: int = DEFAULT_DIMENSION, rng: np.random.Generator | None = None) -> None:
        if dimension < 1:
            raise InvalidArgument(f"dimension must be >= 1, got {dimension}")
        self.rng = rng if rng is not None else np.random.default_rng()
        self._state = _empty_state(dimension)

    # ---------- State ----------
    @property
    def dimension(self) -> int:
        return self._state.dimension

    @property
    def vocabulary(self) -> Vocabulary:
        return self._state.vocabulary

    @property
    def table(self) -> EmbeddingTable:
        return self._state.table

    def initialize(self, corpus: Iterable[str], dimension: int = DEFAULT_DIMENSION) -> None:
        if dimension < 1:
            raise InvalidArgument(f"dimension must be >= 1, got {dimension}")
        vocab = Vocabulary.build(corpus)
        table = EmbeddingTable.initialize_fresh(len(vocab), dimension, self.rng)
        self._state = _State(dimension, vocab, table)
        log.debug("Initialized vocabulary=%d dimension=%d", len(vocab), dimension)

    def get_info(self) -> SystemInfo:
        size = len(self._state.vocabulary)
        return SystemInfo(vocabulary_size=size, dimension=self._state.dimension, is_initialized=size > 0)

    # ---------- Encode / decode ----------
    def encode(self, text: str) -> np.ndarray:
        st = self._state
        return encoder.encode(text, st.vocabulary, st.table)

    def embed(self, text: str, dimension: int | None = None) -> np.ndarray:
        if dimension is not None and dimension != self.dimension:
            msg = f"Dimension mismatch. Using initialized dimension: {self.dimension}"
            log.warning(msg)
            warnings.warn(msg, EmbeddingDimensionWarning, stacklevel=2)
        return self.encode(text)

    def decode(self, vector: VectorLike, top_k: int = 5) -> List[str]:
        st = self._state
        return encoder.decode(vector, st.vocabulary, st.table, top_k=top_k)

    # ---------- Metrics ----------
    @staticmethod
    def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
        return metrics.cosine_similarity(a, b)

    @staticmethod
    def euclidean_distance(a: VectorLike, b: VectorLike) -> float:
        return metrics.euclidean_distance(a, b)

    # ---------- Search / clustering ----------
    def semantic_search(self, query: str, documents: Sequence[str], top_k: int = 5) -> List[SearchResult]:
        return search.semantic_search(query, documents, self.encode, top_k=top_k)

    def cluster(self, texts: Sequence[str], num_clusters: int = 3) -> Dict[int, List[str]]:
        return clustering.cluster(texts, self.encode, num_clusters=num_clusters, rng=self.rng)

    # ---------- Persistence ----------
    def export_model(self) -> str:
        st = self._state
        return serialization.export_model(st.dimension, st.vocabulary, st.table)

    def import_model(self, blob: str | bytes) -> None:
        dimension, vocab, table = serialization.import_model(blob)
        self._state = _State(dimension, vocab, table)
        log.debug("Imported model vocabulary=%d dimension=%d", len(vocab), dimension)

default_system = EmbeddingSystem(
    dimension=settings.embedding_dim,
    rng=np.random.default_rng(settings.random_seed),
)
