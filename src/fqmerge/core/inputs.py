"""Gather FASTQ paths from a JSON side file or a directory."""

import json
import re
from pathlib import Path

from fqmerge.core.errors import InputListError

FASTQ_GLOB_SUFFIXES = (".fastq.gz", ".fq.gz")


def load_fastq_list(path):
    """Read a JSON array of FASTQ paths.

    Parameters
    ----------
    path : str or Path
        File containing e.g. ``["a_R1.fastq.gz", "a_R2.fastq.gz"]``.
    """
    with open(path) as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as e:
            raise InputListError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise InputListError(f"{path} must contain a JSON array of path strings")
    return data


def discover_fastqs(input_dir, prefix=None):
    """List gzipped FASTQ files in ``input_dir``, sorted by name.

    If ``prefix`` is given only files named ``{prefix}_*`` are returned.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory does not exist: {input_dir}")

    name_re = re.compile(rf"^{re.escape(prefix)}_") if prefix else None
    found = []
    for f in input_dir.iterdir():
        if not f.is_file() or not f.name.lower().endswith(FASTQ_GLOB_SUFFIXES):
            continue
        if name_re and not name_re.match(f.name):
            continue
        found.append(str(f))
    return sorted(found)
