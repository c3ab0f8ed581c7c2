"""
Simplified k-means: random distinct centroids, then one nearest-centroid pass.

Centroids are never recomputed from their members, so the grouping depends
entirely on the initial draw.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Sequence
import numpy as np

from ..core.exceptions import InvalidArgument
from .metrics import euclidean_distance

def pick_centroids(vectors: Sequence[np.ndarray], k: int, rng: np.random.Generator) -> List[np.ndarray]:
    """Copy up to k vectors at distinct random positions."""
    n = len(vectors)
    picks = rng.choice(n, size=min(k, n), replace=False)
    return [np.array(vectors[int(i)], copy=True) for i in picks]

def cluster(
    texts: Sequence[str],
    encode_fn: Callable[[str], np.ndarray],
    num_clusters: int = 3,
    rng: np.random.Generator | None = None,
) -> Dict[int, List[str]]:
    if not texts:
        return {}
    if num_clusters < 1:
        raise InvalidArgument(f"num_clusters must be >= 1, got {num_clusters}")
    rng = rng if rng is not None else np.random.default_rng()

    vectors = [encode_fn(t) for t in texts]
    centroids = pick_centroids(vectors, num_clusters, rng)
    clusters: Dict[int, List[str]] = {i: [] for i in range(num_clusters)}

    for text, vec in zip(texts, vectors):
        best, best_dist = 0, float("inf")
        for idx, centroid in enumerate(centroids):
            dist = euclidean_distance(vec, centroid)
            if dist < best_dist:
                best, best_dist = idx, dist
        clusters[best].append(text)
    return clusters
