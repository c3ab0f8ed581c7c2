"""
Ranked semantic search of a document list against a query.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Sequence
import numpy as np

from .metrics import cosine_similarity

@dataclass(frozen=True)
class SearchResult:
    text: str
    score: float
    index: int  # position in the input documents, not in the ranking

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

def semantic_search(
    query: str,
    documents: Sequence[str],
    encode_fn: Callable[[str], np.ndarray],
    top_k: int = 5,
) -> List[SearchResult]:
    qvec = encode_fn(query)
    # documents are re-encoded on every call
    results = [
        SearchResult(text=doc, score=cosine_similarity(qvec, encode_fn(doc)), index=idx)
        for idx, doc in enumerate(documents)
    ]
    results.sort(key=lambda r: (-r.score, r.index))
    return results[:max(top_k, 0)]
