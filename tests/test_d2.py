import numpy as np
import pytest

from bblast.errors import VectorLengthMismatch
from bblast.kmers.counter import count_kmers
from bblast.scoring.d2 import score_d2


def test_self_score_is_sum_of_squares():
    v = count_kmers("ACGTTGCAACGTAAAC", 2)
    assert score_d2(v, v) == int((v * v).sum())
    assert score_d2(v, v) >= 0


def test_scenario_scores():
    acgt = count_kmers("ACGT", 2)
    assert score_d2(acgt, acgt) == 3

    aaaa = count_kmers("AAAA", 1)
    assert score_d2(aaaa, aaaa) == 16

    assert score_d2(count_kmers("AC", 2), count_kmers("GT", 2)) == 0


def test_score_is_commutative():
    rng = np.random.default_rng(7)
    for _ in range(10):
        a = rng.integers(0, 20, size=64)
        b = rng.integers(0, 20, size=64)
        assert score_d2(a, b) == score_d2(b, a)


def test_returns_plain_int():
    v = count_kmers("ACGT", 1)
    assert type(score_d2(v, v)) is int


def test_length_mismatch():
    with pytest.raises(VectorLengthMismatch):
        score_d2(count_kmers("ACGT", 1), count_kmers("ACGT", 2))
