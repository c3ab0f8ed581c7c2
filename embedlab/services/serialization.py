"""
Export/import of vocabulary + embedding table as a JSON blob:

    {"dimension": D, "vocabulary": [tok, ...], "embeddings": [[id, [x, ...]], ...]}
"""
from __future__ import annotations
import json
from typing import List, Tuple, Union
import numpy as np
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, ValidationError, model_validator

from ..core.exceptions import MalformedModel
from .embeddings import EmbeddingTable
from .vocabulary import Vocabulary

class ModelPayload(BaseModel):
    # strict scalars: no "1" -> 1 or false -> 0 coercion
    dimension: StrictInt = Field(ge=1)
    vocabulary: List[StrictStr]
    embeddings: List[Tuple[StrictInt, List[Union[StrictFloat, StrictInt]]]]

    @model_validator(mode="after")
    def _check_shape(self) -> "ModelPayload":
        n = len(self.vocabulary)
        if len(set(self.vocabulary)) != n:
            raise ValueError("vocabulary tokens must be unique")
        ids = sorted(idx for idx, _ in self.embeddings)
        if ids != list(range(n)):
            raise ValueError(f"embedding ids must cover 0..{n - 1} exactly once")
        for idx, vec in self.embeddings:
            if len(vec) != self.dimension:
                raise ValueError(
                    f"embedding {idx} has {len(vec)} components, expected {self.dimension}"
                )
        return self

def export_model(dimension: int, vocabulary: Vocabulary, table: EmbeddingTable) -> str:
    payload = {
        "dimension": dimension,
        "vocabulary": list(vocabulary.tokens),
        "embeddings": [[idx, table.vector(idx).tolist()] for idx in range(len(table))],
    }
    return json.dumps(payload, ensure_ascii=False)

def import_model(blob: str | bytes) -> Tuple[int, Vocabulary, EmbeddingTable]:
    try:
        data = json.loads(blob)
        payload = ModelPayload.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, RecursionError) as e:
        raise MalformedModel(f"Model blob is not valid JSON: {e}") from e
    except ValidationError as e:
        raise MalformedModel(f"Model blob has an invalid structure: {e}") from e

    vocab = Vocabulary.from_tokens(payload.vocabulary)
    mat = np.zeros((len(vocab), payload.dimension), dtype=np.float64)
    for idx, vec in payload.embeddings:
        mat[idx] = vec
    return payload.dimension, vocab, EmbeddingTable(mat)
