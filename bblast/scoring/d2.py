import numpy as np

from ..errors import VectorLengthMismatch


def score_d2(vector_a: np.ndarray, vector_b: np.ndarray) -> int:
    """
    Raw D2 statistic: sum over every k-mer slot of count_a * count_b.

    Larger means more shared k-mer content. Both vectors must come from the
    same k and ambiguity policy.
    """
    if len(vector_a) != len(vector_b):
        raise VectorLengthMismatch(len(vector_a), len(vector_b))
    return int(np.dot(vector_a, vector_b))
