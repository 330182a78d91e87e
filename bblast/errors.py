class D2Error(ValueError):
    """Base class for every failure raised by the D2 core and its loaders."""


class InvalidKmerLength(D2Error):
    def __init__(self, k):
        super().__init__(f"k-mer length must be >= 1, got {k}")
        self.k = k


class AlphabetOverflow(D2Error):
    def __init__(self, alphabetSize: int, k: int, maxVectorSize: int):
        super().__init__(
            f"{alphabetSize}^{k} k-mer slots exceed the maximum vector size of {maxVectorSize}"
        )
        self.alphabetSize = alphabetSize
        self.k = k
        self.maxVectorSize = maxVectorSize


class VectorLengthMismatch(D2Error):
    def __init__(self, lengthA: int, lengthB: int):
        super().__init__(f"cannot score vectors of length {lengthA} and {lengthB}")
        self.lengthA = lengthA
        self.lengthB = lengthB


class EmptyCollection(D2Error):
    def __init__(self, which: str):
        super().__init__(f"{which} collection contains no sequences")
        self.which = which


class SequenceFormatError(D2Error):
    pass
