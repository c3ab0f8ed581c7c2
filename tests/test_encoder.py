import math

import numpy as np
import pytest

from embedlab.core.exceptions import InvalidArgument
from embedlab.services.embeddings import EmbeddingTable
from embedlab.services.encoder import decode, encode
from embedlab.services.vocabulary import Vocabulary

VOCAB = Vocabulary.build(["a b"])
TABLE = EmbeddingTable(np.array([[1.0, 0.0], [0.0, 1.0]]))

def test_encode_single_token():
    assert np.allclose(encode("A", VOCAB, TABLE), [1.0, 0.0])

def test_encode_is_normalized_mean():
    h = 1 / math.sqrt(2)
    assert np.allclose(encode("a b", VOCAB, TABLE), [h, h])
    # duplicates weigh the mean: (2/3, 1/3) normalized
    expected = np.array([2.0, 1.0]) / math.sqrt(5)
    assert np.allclose(encode("a a b", VOCAB, TABLE), expected)

def test_encode_skips_unknown_tokens():
    assert np.allclose(encode("a zzz", VOCAB, TABLE), [1.0, 0.0])

def test_encode_empty_or_unknown_is_zero():
    assert np.array_equal(encode("", VOCAB, TABLE), np.zeros(2))
    assert np.array_equal(encode("zzz yyy", VOCAB, TABLE), np.zeros(2))

def test_encode_opposite_vectors_mean_to_zero():
    table = EmbeddingTable(np.array([[1.0, 0.0], [-1.0, 0.0]]))
    assert np.array_equal(encode("a b", VOCAB, table), np.zeros(2))

def test_encode_deterministic(rng):
    vocab = Vocabulary.build(["the quick brown fox", "jumps over the lazy dog"])
    table = EmbeddingTable.initialize_fresh(len(vocab), 32, rng)
    v1 = encode("the lazy fox", vocab, table)
    v2 = encode("the lazy fox", vocab, table)
    assert np.array_equal(v1, v2)
    assert np.linalg.norm(v1) == pytest.approx(1.0)

def test_decode_orders_by_similarity():
    assert decode([0.2, 0.9], VOCAB, TABLE, top_k=2) == ["b", "a"]
    assert decode([0.2, 0.9], VOCAB, TABLE, top_k=1) == ["b"]

def test_decode_ties_keep_vocabulary_order():
    assert decode([1.0, 1.0], VOCAB, TABLE, top_k=2) == ["a", "b"]
    assert decode([0.0, 0.0], VOCAB, TABLE, top_k=2) == ["a", "b"]

def test_decode_top_k_larger_than_vocabulary():
    assert decode([1.0, 0.0], VOCAB, TABLE, top_k=10) == ["a", "b"]
    assert decode([1.0, 0.0], VOCAB, TABLE, top_k=0) == []

def test_decode_empty_vocabulary():
    assert decode([1.0, 0.0], Vocabulary(), EmbeddingTable(np.zeros((0, 2)))) == []

def test_decode_wrong_length():
    with pytest.raises(InvalidArgument):
        decode([1.0, 0.0, 0.0], VOCAB, TABLE)

def test_decode_rejects_nested_vector():
    table = EmbeddingTable(np.eye(4))
    vocab = Vocabulary.build(["a b c d"])
    with pytest.raises(InvalidArgument):
        decode([[1.0, 0.0], [0.0, 1.0]], vocab, table)
