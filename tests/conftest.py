import pytest


@pytest.fixture
def write_fasta(tmp_path):
    """Write (identifier, sequence) records to a FASTA file and return its path."""
    def _write(name, records):
        path = tmp_path / name
        with open(path, "w") as fh:
            for identifier, sequence in records:
                fh.write(f">{identifier}\n{sequence}\n")
        return path
    return _write
