import io

import numpy as np
import pytest

from bblast.output.matrix_writer import MatrixWriter


def test_labeled_tab_separated_output():
    out = io.StringIO()
    MatrixWriter(out).writeMatrix(np.array([[3.0, 0.0], [1234567.0, 16.0]]), ["q0", "q1"], ["t0", "t1"])

    assert out.getvalue() == "\tt0\tt1\nq0\t3\t0\nq1\t1234567\t16\n"


def test_label_mismatch():
    with pytest.raises(ValueError):
        MatrixWriter(io.StringIO()).writeMatrix(np.zeros((2, 2)), ["q0"], ["t0", "t1"])
