from dataclasses import dataclass, field
from typing import IO, List, Optional

import numpy as np

from ..constants.constants import KMERSIZE
from .config import AmbiguityPolicy


@dataclass
class ComparerInput:
    # required fields
    query: IO

    outputLocation: str

    # optional fields
    target: Optional[IO] = None
    kmerSize: int = KMERSIZE
    ambiguityPolicy: AmbiguityPolicy = AmbiguityPolicy.SKIP_WINDOW
    symmetric: bool = False


@dataclass
class ComparerOutput:
    scoreMatrix: np.ndarray
    outputLocation: str
    queryIds: List[str] = field(default_factory=list)
    targetIds: List[str] = field(default_factory=list)
