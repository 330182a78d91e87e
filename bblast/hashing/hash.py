from typing import Optional


class Hash:
    """
    Base-`alphabet_size` positional encoding of k-mers.

    The first symbol of a window is the most significant digit, so indices
    follow lexicographic order over the alphabet (AA..A = 0, TT..T or NN..N
    = alphabet_size^k - 1).
    """
    def __init__(self, k: int, alphabet: str, unknown: Optional[str] = None):
        self.k = k
        self.alphabet = alphabet
        self.base = len(alphabet)
        self.power = self.base**(k-1)
        self.size = self.base**k

        self.encode = {c: rank for rank, c in enumerate(alphabet)}
        # rank used for symbols outside the alphabet, None means "not encodable"
        self.unknown = self.encode[unknown] if unknown is not None else None

    def rank(self, c: str) -> Optional[int]:
        return self.encode.get(c, self.unknown)

    def hash_sequence(self, s: str) -> int:
        h = 0
        for c in s:
            h = h * self.base + self.rank(c)
        return h

    def update(self, prev_hash: int, out_val: int, in_val: int) -> int:
        """
        Rolling hash update - removes leftmost symbol and adds rightmost symbol

        Args:
            prev_hash: The previous hash value
            out_val: rank leaving the window (leftmost)
            in_val: rank entering the window (rightmost)

        Returns:
            Updated hash value
        """
        # Remove contribution of outgoing symbol
        h = prev_hash - out_val * self.power

        # Shift left and add incoming symbol
        return h * self.base + in_val
