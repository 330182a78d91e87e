import logging
from typing import List

import numpy as np

from ..errors import EmptyCollection
from ..kmers.counter import KmerCounter
from ..models.config import AmbiguityPolicy, ScoringConfig
from ..models.sequence import SequenceCollection
from ..scoring.d2 import score_d2

logger = logging.getLogger(__name__)


class DistanceMatrixBuilder:
    """
    Builds the |query| x |target| D2 score matrix for two sequence collections
    """

    def __init__(self, config: ScoringConfig):
        self.config = config
        self.counter = KmerCounter(config)

    def count_collection(self, collection: SequenceCollection) -> List[np.ndarray]:
        return [self.counter.count(seq) for seq in collection]

    def build(
            self,
            query: SequenceCollection,
            target: SequenceCollection,
            symmetric: bool = False,
            ) -> np.ndarray:
        """
        Score every query sequence against every target sequence.

        Args:
        query: rows of the matrix, in collection order
        target: columns of the matrix, in collection order
        symmetric: caller asserts query and target are the same collection.
            Only the upper triangle is scored and mirrored, and only after the
            two collections are checked to hold identical sequences.

        Returns:
        float64 array of shape (len(query), len(target)). Scores are exact
        integers up to 2**53; larger D2 values are rounded to the nearest double.
        """
        if len(query) == 0:
            raise EmptyCollection("query")
        if len(target) == 0:
            raise EmptyCollection("target")

        identical = query.sameContentAs(target)
        if symmetric and not identical:
            logger.warning(
                "Symmetric scoring requested but query and target differ; computing the full matrix"
            )
        mirror = symmetric and identical

        # Count every sequence once before scoring
        queryCounts = self.count_collection(query)
        targetCounts = queryCounts if identical else self.count_collection(target)

        queryNumber = len(query)
        targetNumber = len(target)
        scoreMatrix = np.zeros((queryNumber, targetNumber), dtype=np.float64)

        for rowIndex in range(queryNumber):
            logger.debug("Sequence number %d", rowIndex)
            start = rowIndex if mirror else 0
            for colIndex in range(start, targetNumber):
                score = score_d2(queryCounts[rowIndex], targetCounts[colIndex])
                scoreMatrix[rowIndex, colIndex] = score
                if mirror:
                    scoreMatrix[colIndex, rowIndex] = score  # Copy symmetric entries

        return scoreMatrix


def build_distance_matrix(
        query: SequenceCollection,
        target: SequenceCollection,
        k: int,
        ambiguity_policy: AmbiguityPolicy = AmbiguityPolicy.SKIP_WINDOW,
        symmetric: bool = False,
        ) -> np.ndarray:
    config = ScoringConfig(kmerLength=k, ambiguityPolicy=ambiguity_policy)
    return DistanceMatrixBuilder(config).build(query, target, symmetric=symmetric)
