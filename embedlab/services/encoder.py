"""
Text -> vector (encode) and vector -> nearest vocabulary words (decode).
"""
from __future__ import annotations
from typing import List
import numpy as np

from ..core.exceptions import InvalidArgument
from .embeddings import EmbeddingTable, normalize
from .metrics import VectorLike
from .tokenizer import tokenize
from .vocabulary import Vocabulary

def encode(text: str, vocabulary: Vocabulary, table: EmbeddingTable) -> np.ndarray:
    """Normalized mean of the known tokens' vectors; zeros if none are known."""
    ids = [i for i in (vocabulary.id_of(t) for t in tokenize(text)) if i is not None]
    if not ids:
        return np.zeros(table.dimension, dtype=np.float64)
    mean = table.matrix[ids].mean(axis=0)
    return normalize(mean)

def decode(vector: VectorLike, vocabulary: Vocabulary, table: EmbeddingTable, top_k: int = 5) -> List[str]:
    v = np.asarray(vector, dtype=np.float64)
    if v.ndim != 1 or v.size != table.dimension:
        raise InvalidArgument(f"Expected a vector of length {table.dimension}, got shape {v.shape}")
    if len(vocabulary) == 0 or top_k <= 0:
        return []

    mat = table.matrix
    norms = np.linalg.norm(mat, axis=1) * np.linalg.norm(v)
    dots = mat @ v
    sims = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)
    # stable sort keeps first-seen order among equal scores
    order = np.argsort(-sims, kind="stable")[:top_k]
    return [vocabulary.token_of(int(i)) for i in order]
