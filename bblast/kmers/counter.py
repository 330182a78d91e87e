from typing import List, Union

import numpy as np

from ..hashing.hash import Hash
from ..models.config import AmbiguityPolicy, ScoringConfig
from ..models.sequence import Sequence


class KmerCounter:
    def __init__(self, config: ScoringConfig):
        self.config = config
        self.k = config.kmerLength
        policy = config.ambiguityPolicy
        unknown = "N" if policy is AmbiguityPolicy.EXTEND_ALPHABET else None
        self.hash = Hash(self.k, policy.alphabet, unknown=unknown)

    def window_indices(self, seq: str) -> List[int]:
        """
        Index of every counted window, in sequence order.

        A window holding a symbol with no rank (only possible when
        ambiguous windows are skipped) is left out and hashing restarts
        right after that symbol.
        """
        k = self.k
        indices = []
        if len(seq) < k:
            return indices

        ranks = [self.hash.rank(c) for c in seq]
        current_hash = 0
        run = 0  # consecutive encodable symbols ending at i
        for i, r in enumerate(ranks):
            if r is None:
                current_hash = 0
                run = 0
                continue
            if run < k:
                current_hash = current_hash * self.hash.base + r
                run += 1
            else:
                current_hash = self.hash.update(current_hash, ranks[i-k], r)
            if run == k:
                indices.append(current_hash)
        return indices

    def count(self, sequence: Union[Sequence, str]) -> np.ndarray:
        """
        Dense k-mer frequency vector of length alphabet_size^k.

        Sequences shorter than k give an all-zero vector. The returned
        array is read-only.
        """
        seq = sequence.getSequence() if isinstance(sequence, Sequence) else sequence.upper()
        indices = self.window_indices(seq)
        counts = np.bincount(
            np.asarray(indices, dtype=np.int64),
            minlength=self.hash.size,
        ).astype(np.int64, copy=False)
        counts.flags.writeable = False
        return counts


def count_kmers(
        sequence: Union[Sequence, str],
        k: int,
        ambiguity_policy: AmbiguityPolicy = AmbiguityPolicy.SKIP_WINDOW,
        ) -> np.ndarray:
    config = ScoringConfig(kmerLength=k, ambiguityPolicy=ambiguity_policy)
    return KmerCounter(config).count(sequence)
