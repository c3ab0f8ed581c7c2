import json

import numpy as np
import pytest

from embedlab.services.system import EmbeddingSystem

def make_blob(tokens, vectors):
    vectors = [list(map(float, v)) for v in vectors]
    return json.dumps({
        "dimension": len(vectors[0]) if vectors else 3,
        "vocabulary": list(tokens),
        "embeddings": [[i, v] for i, v in enumerate(vectors)],
    })

@pytest.fixture
def rng():
    return np.random.default_rng(1234)

@pytest.fixture
def basis_system(rng):
    """alpha/beta/gamma mapped onto the unit axes of R^3."""
    system = EmbeddingSystem(rng=rng)
    system.import_model(make_blob(["alpha", "beta", "gamma"], np.eye(3)))
    return system
