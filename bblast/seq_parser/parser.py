import logging
from typing import IO, Optional

from ..errors import SequenceFormatError
from ..models.sequence import Sequence, SequenceCollection

logger = logging.getLogger(__name__)

FASTA = "fasta"
FASTQ = "fastq"


class Parser:
    """
    Reads FASTA or FASTQ records from an open text file.

    The format is guessed from the first non-blank character: '>' for
    FASTA, '@' for FASTQ.
    """
    def __init__(self, sequenceFile: IO):
        self.sequenceFile = sequenceFile
        self.format = None
        self._pendingHeader = None

        line = self._nextNonBlankLine()
        if line is None:
            return
        if line.startswith(">"):
            self.format = FASTA
        elif line.startswith("@"):
            self.format = FASTQ
        else:
            raise SequenceFormatError(f"unrecognised sequence format, first line: {line[:40]!r}")
        self._pendingHeader = line

    def _readline(self) -> str:
        try:
            return self.sequenceFile.readline()
        except UnicodeDecodeError as e:
            raise SequenceFormatError(f"sequence file is not UTF-8 text: {e}") from e

    def _nextNonBlankLine(self) -> Optional[str]:
        while True:
            line = self._readline()
            if not line:
                return None
            # removing the newline characters if applicable
            line = line.rstrip("\r\n")
            if line.strip():
                return line

    @staticmethod
    def _identifier(header: str) -> str:
        fields = header[1:].split()
        return fields[0] if fields else ""

    def _parseNextFasta(self) -> Optional[Sequence]:
        header = self._pendingHeader
        self._pendingHeader = None
        chunks = []
        while True:
            line = self._nextNonBlankLine()
            if line is None:
                break
            if line.startswith(">"):
                self._pendingHeader = line
                break
            chunks.append("".join(line.split()))
        return Sequence(identifier=self._identifier(header), sequence="".join(chunks))

    def _parseNextFastq(self) -> Optional[Sequence]:
        header = self._pendingHeader
        self._pendingHeader = None
        sequence = "".join(self._readline().split())
        plus = self._readline()
        quality = self._readline()
        if not plus.startswith("+") or not quality:
            raise SequenceFormatError(f"truncated FASTQ record {self._identifier(header)!r}")
        self._pendingHeader = self._nextNonBlankLine()
        if self._pendingHeader is not None and not self._pendingHeader.startswith("@"):
            raise SequenceFormatError(f"expected FASTQ header, got {self._pendingHeader[:40]!r}")
        return Sequence(identifier=self._identifier(header), sequence=sequence)

    def parseNextSequence(self) -> Optional[Sequence]:
        if self._pendingHeader is None:
            return None
        if self.format == FASTA:
            return self._parseNextFasta()
        return self._parseNextFastq()

    def parseAllSequences(self) -> SequenceCollection:
        sequences = []
        while True:
            sequence = self.parseNextSequence()
            if sequence is None:
                break
            sequences.append(sequence)

        logger.debug("Parsed %d %s records", len(sequences), self.format or "empty")
        return SequenceCollection(sequences)


def load_sequences(path: str) -> SequenceCollection:
    with open(path, "r", encoding="utf-8") as sequenceFile:
        return Parser(sequenceFile).parseAllSequences()
