from itertools import product

import numpy as np
import pytest

from bblast.errors import AlphabetOverflow, InvalidKmerLength
from bblast.hashing.hash import Hash
from bblast.kmers.counter import KmerCounter, count_kmers
from bblast.models.config import AmbiguityPolicy, ScoringConfig
from bblast.models.sequence import Sequence


def naive_counts(seq, k, alphabet):
    """Lexicographic k-mer table, built without any rolling hash."""
    index = {"".join(p): i for i, p in enumerate(product(alphabet, repeat=k))}
    counts = np.zeros(len(index), dtype=np.int64)
    for i in range(len(seq) - k + 1):
        kmer = seq[i:i + k]
        if kmer in index:
            counts[index[kmer]] += 1
    return counts


def test_acgt_dimers_fill_expected_slots():
    counts = count_kmers("ACGT", 2)

    assert counts.shape == (16,)
    assert np.flatnonzero(counts).tolist() == [1, 6, 11]  # AC, CG, GT
    assert counts.sum() == 3


def test_single_base_counts():
    counts = count_kmers("AAAA", 1)
    assert counts.tolist() == [4, 0, 0, 0]


@pytest.mark.parametrize("seq,k", [("", 1), ("A", 2), ("ACG", 4), ("ACGTACG", 8)])
def test_sequence_shorter_than_k_gives_zero_vector(seq, k):
    counts = count_kmers(seq, k)
    assert counts.shape == (4**k,)
    assert not counts.any()


@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_window_total_is_n_minus_k_plus_one(k):
    seq = "GATTACACCGTTAGCATGCAAGT"
    assert count_kmers(seq, k).sum() == len(seq) - k + 1


@pytest.mark.parametrize("k", [1, 3, 4])
def test_rolling_hash_matches_direct_counting(k):
    seq = "TTGACCGATAGGCTAACGTTTACGGA"
    np.testing.assert_array_equal(count_kmers(seq, k), naive_counts(seq, k, "ACGT"))


def test_skip_window_drops_windows_touching_ambiguity():
    counts = count_kmers("ACNGT", 2, AmbiguityPolicy.SKIP_WINDOW)

    assert counts.shape == (16,)
    assert np.flatnonzero(counts).tolist() == [1, 11]  # AC, GT


def test_skip_window_restarts_after_ambiguity():
    seq = "ACGNNACGTTARYACG"
    np.testing.assert_array_equal(
        count_kmers(seq, 3, AmbiguityPolicy.SKIP_WINDOW),
        naive_counts(seq, 3, "ACGT"),
    )


def test_extend_alphabet_counts_ambiguity_as_n():
    counts = count_kmers("ACNGT", 2, AmbiguityPolicy.EXTEND_ALPHABET)

    assert counts.shape == (25,)
    assert counts.sum() == 4
    # AC, CN, NG, GT in base 5
    assert np.flatnonzero(counts).tolist() == [1, 9, 13, 22]


def test_extend_alphabet_maps_every_ambiguity_code_to_n():
    np.testing.assert_array_equal(
        count_kmers("ARGYW", 2, AmbiguityPolicy.EXTEND_ALPHABET),
        count_kmers("ANGNN", 2, AmbiguityPolicy.EXTEND_ALPHABET),
    )


def test_lower_case_counts_like_upper_case():
    np.testing.assert_array_equal(count_kmers("acgtN", 2), count_kmers("ACGTN", 2))
    np.testing.assert_array_equal(
        count_kmers(Sequence("s", "acgt"), 2), count_kmers("ACGT", 2)
    )


def test_counts_are_read_only():
    counts = count_kmers("ACGT", 1)
    with pytest.raises(ValueError):
        counts[0] = 5


@pytest.mark.parametrize("k", [0, -1])
def test_invalid_kmer_length(k):
    with pytest.raises(InvalidKmerLength):
        count_kmers("ACGT", k)


def test_alphabet_overflow():
    with pytest.raises(AlphabetOverflow):
        count_kmers("ACGT", 17)
    with pytest.raises(AlphabetOverflow):
        count_kmers("ACGT", 14, AmbiguityPolicy.EXTEND_ALPHABET)


def test_counter_uses_configured_maximum():
    with pytest.raises(AlphabetOverflow):
        KmerCounter(ScoringConfig(kmerLength=3, maxVectorSize=63))
    counter = KmerCounter(ScoringConfig(kmerLength=3, maxVectorSize=64))
    assert counter.count("ACGTA").sum() == 3


def test_hash_update_matches_full_hash():
    h = Hash(3, "ACGT")
    first = h.hash_sequence("ACG")
    rolled = h.update(first, h.rank("A"), h.rank("T"))
    assert rolled == h.hash_sequence("CGT")
