"""Shared fixtures for fqmerge tests."""

import gzip

import pytest


def fastq_text(name, n_reads, seq="ACGTACGTAC"):
    lines = []
    for i in range(n_reads):
        lines.append(f"@{name}:{i}\n{seq}\n+\n{'I' * len(seq)}\n")
    return "".join(lines)


@pytest.fixture
def write_fastq(tmp_path):
    """Factory writing a gzipped FASTQ with ``n_reads`` records; returns its path."""

    def _write(filename, n_reads=3, directory=None):
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        with gzip.open(path, "wt") as fh:
            fh.write(fastq_text(filename.split(".")[0], n_reads))
        return str(path)

    return _write
