from typing import Iterable, Iterator, Tuple


class Sequence:
    def __init__(self, identifier: str, sequence: str):
        self.identifier = identifier
        # soft-masked (lower case) bases count like their upper case form
        self.sequence = sequence.upper()

    def getIdentifier(self) -> str:
        return self.identifier

    def getSequence(self) -> str:
        return self.sequence

    def __len__(self) -> int:
        return len(self.sequence)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.identifier == other.identifier and self.sequence == other.sequence

    def __hash__(self) -> int:
        return hash((self.identifier, self.sequence))

    def __repr__(self) -> str:
        return f"Sequence({self.identifier!r}, length={len(self.sequence)})"


class SequenceCollection:
    """
    Ordered, immutable set of sequences. The position of a sequence in the
    collection is its row (query) or column (target) in the score matrix.
    """
    def __init__(self, sequences: Iterable[Sequence] = ()):
        self._sequences: Tuple[Sequence, ...] = tuple(sequences)

    @classmethod
    def fromStrings(cls, sequences: Iterable[str], prefix: str = "seq") -> "SequenceCollection":
        return cls(Sequence(f"{prefix}{i}", s) for i, s in enumerate(sequences))

    def getIdentifiers(self) -> list:
        return [s.getIdentifier() for s in self._sequences]

    def sameContentAs(self, other: "SequenceCollection") -> bool:
        """True when both collections hold the same symbols in the same order."""
        if self is other:
            return True
        if len(self) != len(other):
            return False
        return all(a.getSequence() == b.getSequence() for a, b in zip(self, other))

    def __len__(self) -> int:
        return len(self._sequences)

    def __iter__(self) -> Iterator[Sequence]:
        return iter(self._sequences)

    def __getitem__(self, index: int) -> Sequence:
        return self._sequences[index]

    def __repr__(self) -> str:
        return f"SequenceCollection({len(self._sequences)} sequences)"
