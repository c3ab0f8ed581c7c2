"""
Random unit-vector embedding table, one row per vocabulary id.
"""
from __future__ import annotations
import numpy as np

def normalize(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm > 0:
        return vector / norm
    return vector

class EmbeddingTable:
    def __init__(self, vectors: np.ndarray) -> None:
        vectors = np.array(vectors, dtype=np.float64)
        if vectors.ndim != 2:
            raise ValueError(f"Embedding table must be 2-D, got shape {vectors.shape}")
        self._vectors = vectors
        self._vectors.setflags(write=False)

    @classmethod
    def initialize_fresh(cls, vocab_size: int, dimension: int, rng: np.random.Generator) -> "EmbeddingTable":
        """Draw each component from U[-1, 1) and scale every row to unit length.

        Rows whose norm is exactly zero are left as zeros.
        """
        vecs = rng.uniform(-1.0, 1.0, size=(vocab_size, dimension))
        norms = np.linalg.norm(vecs, axis=1, keepdims=True)
        vecs = np.divide(vecs, norms, out=vecs.copy(), where=norms > 0)
        return cls(vecs)

    @property
    def dimension(self) -> int:
        return int(self._vectors.shape[1])

    @property
    def matrix(self) -> np.ndarray:
        return self._vectors

    def vector(self, idx: int) -> np.ndarray:
        return self._vectors[idx]

    def __len__(self) -> int:
        return int(self._vectors.shape[0])
