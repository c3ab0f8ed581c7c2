import numpy as np
import pytest

from embedlab.services.embeddings import EmbeddingTable, normalize

def test_fresh_table_shape_and_unit_norm(rng):
    table = EmbeddingTable.initialize_fresh(7, 16, rng)
    assert len(table) == 7
    assert table.dimension == 16
    assert table.matrix.shape == (7, 16)
    assert np.allclose(np.linalg.norm(table.matrix, axis=1), 1.0)
    assert table.matrix.min() >= -1.0 and table.matrix.max() <= 1.0

def test_empty_vocabulary_table(rng):
    table = EmbeddingTable.initialize_fresh(0, 8, rng)
    assert len(table) == 0
    assert table.dimension == 8

def test_same_seed_same_table():
    a = EmbeddingTable.initialize_fresh(3, 4, np.random.default_rng(7))
    b = EmbeddingTable.initialize_fresh(3, 4, np.random.default_rng(7))
    assert np.array_equal(a.matrix, b.matrix)

def test_normalize_zero_vector_stays_zero():
    out = normalize(np.zeros(4))
    assert np.array_equal(out, np.zeros(4))
    assert np.allclose(normalize(np.array([3.0, 4.0])), [0.6, 0.8])

def test_table_is_read_only(rng):
    table = EmbeddingTable.initialize_fresh(2, 3, rng)
    with pytest.raises(ValueError):
        table.matrix[0, 0] = 5.0

class _ZeroRng:
    def uniform(self, low, high, size):
        return np.zeros(size)

def test_zero_draw_rows_stay_zero():
    table = EmbeddingTable.initialize_fresh(2, 3, _ZeroRng())
    assert np.array_equal(table.matrix, np.zeros((2, 3)))
    assert not np.isnan(table.matrix).any()
