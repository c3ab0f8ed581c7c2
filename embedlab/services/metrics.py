"""
Cosine similarity and Euclidean distance over equal-length vectors.
"""
from __future__ import annotations
from typing import Sequence, Union
import numpy as np

from ..core.exceptions import DimensionMismatch

VectorLike = Union[Sequence[float], np.ndarray]

def _pair(a: VectorLike, b: VectorLike) -> tuple[np.ndarray, np.ndarray]:
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.ndim != 1 or vb.ndim != 1:
        raise DimensionMismatch(f"Expected flat vectors, got shapes {va.shape} and {vb.shape}")
    if va.shape != vb.shape:
        raise DimensionMismatch(f"Vectors must have same dimension ({va.size} != {vb.size})")
    return va, vb

def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    va, vb = _pair(a, b)
    na = np.linalg.norm(va)
    nb = np.linalg.norm(vb)
    # zero magnitude scores 0 instead of failing
    if na == 0 or nb == 0:
        return 0.0
    return float(np.dot(va, vb) / (na * nb))

def euclidean_distance(a: VectorLike, b: VectorLike) -> float:
    va, vb = _pair(a, b)
    return float(np.linalg.norm(va - vb))
