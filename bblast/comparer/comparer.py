import logging
import sys
from abc import ABC, abstractmethod
from typing import IO

from ..matrix.builder import DistanceMatrixBuilder
from ..models.comparer import ComparerInput, ComparerOutput
from ..models.config import ScoringConfig
from ..models.sequence import SequenceCollection
from ..output.matrix_writer import MatrixWriter
from ..seq_parser.parser import Parser

logger = logging.getLogger(__name__)

STDOUT = "-"


class ASequenceComparer(ABC):
    @abstractmethod
    def compare(self, inputData: ComparerInput) -> ComparerOutput:
        pass


class SequenceComparer(ASequenceComparer):
    def loadCollection(self, sequenceFile: IO, name: str) -> SequenceCollection:
        logger.info("Loading %s sequences from %s", name, getattr(sequenceFile, "name", "<stream>"))
        return Parser(sequenceFile).parseAllSequences()

    def compare(self, inputData: ComparerInput) -> ComparerOutput:
        # fail on a bad k before reading any input
        config = ScoringConfig(
            kmerLength=inputData.kmerSize,
            ambiguityPolicy=inputData.ambiguityPolicy,
        )

        querySeqs = self.loadCollection(inputData.query, "query")
        if inputData.target is None:
            # query against itself is the one case known to be identical
            targetSeqs = querySeqs
            symmetric = True
        else:
            targetSeqs = self.loadCollection(inputData.target, "target")
            symmetric = inputData.symmetric
        logger.info("Sequences loaded")

        logger.info("Computing D2 distances")
        builder = DistanceMatrixBuilder(config)
        scoreMatrix = builder.build(querySeqs, targetSeqs, symmetric=symmetric)

        queryIds = querySeqs.getIdentifiers()
        targetIds = targetSeqs.getIdentifiers()
        if inputData.outputLocation == STDOUT:
            MatrixWriter(sys.stdout).writeMatrix(scoreMatrix, queryIds, targetIds)
        else:
            with open(inputData.outputLocation, "w") as outputFile:
                MatrixWriter(outputFile).writeMatrix(scoreMatrix, queryIds, targetIds)

        return ComparerOutput(
            scoreMatrix=scoreMatrix,
            outputLocation=inputData.outputLocation,
            queryIds=queryIds,
            targetIds=targetIds,
        )
