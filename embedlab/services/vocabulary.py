"""
Ordered token <-> id mapping built from a corpus.
"""
from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Tuple

from ..core.exceptions import MalformedModel
from .tokenizer import tokenize

class Vocabulary:
    """Dense ids in first-seen order. Ids are never reused or removed."""

    def __init__(self) -> None:
        self._tokens: List[str] = []
        self._ids: Dict[str, int] = {}

    @classmethod
    def build(cls, corpus: Iterable[str]) -> "Vocabulary":
        vocab = cls()
        for text in corpus:
            for token in tokenize(text):
                vocab._add(token)
        return vocab

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Vocabulary":
        vocab = cls()
        for token in tokens:
            if token in vocab._ids:
                raise MalformedModel(f"Duplicate vocabulary token: {token!r}")
            vocab._add(token)
        return vocab

    def _add(self, token: str) -> int:
        idx = self._ids.get(token)
        if idx is None:
            idx = len(self._tokens)
            self._tokens.append(token)
            self._ids[token] = idx
        return idx

    def id_of(self, token: str) -> int | None:
        return self._ids.get(token)

    def token_of(self, idx: int) -> str:
        return self._tokens[idx]

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"
