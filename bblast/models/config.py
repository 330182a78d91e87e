import numbers
from dataclasses import dataclass
from enum import Enum

from ..constants.constants import DNA5_ALPHABET, DNA_ALPHABET, KMERSIZE, MAX_VECTOR_SIZE
from ..errors import AlphabetOverflow, InvalidKmerLength


class AmbiguityPolicy(str, Enum):
    """
    How symbols outside A/C/G/T are counted.

    EXTEND_ALPHABET treats every ambiguity symbol as N, a fifth letter.
    SKIP_WINDOW drops every window that touches one.
    """
    EXTEND_ALPHABET = "extend-alphabet"
    SKIP_WINDOW = "skip-window"

    @property
    def alphabet(self) -> str:
        if self is AmbiguityPolicy.EXTEND_ALPHABET:
            return DNA5_ALPHABET
        return DNA_ALPHABET

    @property
    def alphabetSize(self) -> int:
        return len(self.alphabet)


@dataclass(frozen=True)
class ScoringConfig:
    kmerLength: int = KMERSIZE
    ambiguityPolicy: AmbiguityPolicy = AmbiguityPolicy.SKIP_WINDOW
    maxVectorSize: int = MAX_VECTOR_SIZE

    def __post_init__(self):
        # accept the plain string form coming from the CLI and the API
        object.__setattr__(self, "ambiguityPolicy", AmbiguityPolicy(self.ambiguityPolicy))
        if isinstance(self.kmerLength, bool) or not isinstance(self.kmerLength, numbers.Integral) or self.kmerLength < 1:
            raise InvalidKmerLength(self.kmerLength)
        object.__setattr__(self, "kmerLength", int(self.kmerLength))
        if self.vectorLength > self.maxVectorSize:
            raise AlphabetOverflow(self.ambiguityPolicy.alphabetSize, self.kmerLength, self.maxVectorSize)

    @property
    def alphabetSize(self) -> int:
        return self.ambiguityPolicy.alphabetSize

    @property
    def vectorLength(self) -> int:
        return self.alphabetSize ** self.kmerLength
