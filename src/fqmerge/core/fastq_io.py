"""gzip FASTQ streams, through pigz when it is installed."""

import gzip
import shutil
import subprocess

_PIGZ = shutil.which("pigz")


class _PigzWriter:
    """Context manager for writing gzip-compressed bytes via a pigz subprocess."""

    def __init__(self, path, threads=4, compresslevel=6):
        self._outfile = open(path, "wb")
        self._cmd = [_PIGZ, "-p", str(threads), f"-{compresslevel}", "-c"]
        self._proc = subprocess.Popen(
            self._cmd,
            stdin=subprocess.PIPE,
            stdout=self._outfile,
        )

    def write(self, data):
        return self._proc.stdin.write(data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, *exc):
        self._proc.stdin.close()
        rc = self._proc.wait()
        self._outfile.close()
        if rc != 0 and exc_type is None:
            raise subprocess.CalledProcessError(rc, self._cmd)
        return False


class _PigzReader:
    """Context manager yielding the decompressed bytes of a gzip file."""

    def __init__(self, path):
        self._cmd = [_PIGZ, "-dc", str(path)]
        self._proc = subprocess.Popen(self._cmd, stdout=subprocess.PIPE)

    def read(self, size=-1):
        return self._proc.stdout.read(size)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, *exc):
        self._proc.stdout.close()
        rc = self._proc.wait()
        if rc != 0 and exc_type is None:
            raise subprocess.CalledProcessError(rc, self._cmd)
        return False


def open_gz_writer(path, threads=4, compresslevel=6):
    """Open a binary gzip writer. Uses pigz when available."""
    if _PIGZ:
        return _PigzWriter(path, threads=max(1, threads), compresslevel=compresslevel)
    return gzip.open(path, "wb", compresslevel=compresslevel)


def open_gz_reader(path):
    """Open a binary reader over the decompressed content of ``path``."""
    if _PIGZ:
        return _PigzReader(path)
    return gzip.open(path, "rb")
