from typing import IO, Sequence

import numpy as np


class MatrixWriter:
    """
    A simple writer for labeled score matrices.

    The first line holds the target ids, every following line a query id and
    that query's scores, all tab-separated.
    """
    def __init__(self, outputFile: IO):
        """
        Parameters
        ----------
        outputFile : IO
            An open writable text handle where the matrix will be written.
        """
        self.outputFile = outputFile

    def writeMatrix(self, scoreMatrix: np.ndarray, rowIds: Sequence[str], columnIds: Sequence[str]):
        if scoreMatrix.shape != (len(rowIds), len(columnIds)):
            raise ValueError(
                f"matrix shape {scoreMatrix.shape} does not match "
                f"{len(rowIds)} row and {len(columnIds)} column labels"
            )

        self.outputFile.write("\t" + "\t".join(columnIds) + "\n")
        for rowId, row in zip(rowIds, scoreMatrix):
            outputLine = "\t".join([rowId] + ["%.15g" % value for value in row]) + "\n"
            self.outputFile.write(outputLine)
