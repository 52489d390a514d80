"""Assign FASTQ files to read-type groups by filename."""

import os
from dataclasses import dataclass
from typing import Dict, Tuple

from fqmerge.core.errors import UnclassifiableFileError
from fqmerge.core.read_types import (
    PATTERN_TABLE,
    ReadType,
    match_read_type,
    supported_read_types,
)


@dataclass(frozen=True)
class ClassifiedEntry:
    """One input file with its read type and read-type-free name."""
    path: str
    read_type: ReadType
    normalized_basename: str


@dataclass(frozen=True)
class FastqGroup:
    """All files of one read type, in sorted-basename order."""
    read_type: ReadType
    entries: Tuple[ClassifiedEntry, ...]
    filename: str

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(e.path for e in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


# Only non-empty groups, keyed in ReadType priority order.
ClassificationResult = Dict[ReadType, FastqGroup]


def output_filename(sample_name: str, read_type: ReadType) -> str:
    return f"{sample_name}_{read_type.value}.fastq.gz"


def sort_by_basename(files):
    """Sort paths by basename; full path breaks ties between directories."""
    return sorted(files, key=lambda f: (os.path.basename(f), f))


def classify(files, sample_name, table=PATTERN_TABLE) -> ClassificationResult:
    """Group ``files`` by read type.

    Parameters
    ----------
    files : iterable of str or Path
        FASTQ paths, in any order.
    sample_name : str
        Used to name the merged output of each group.
    table : sequence of (compiled regex, ReadType)
        Ordered rules; the first match wins.

    Raises
    ------
    UnclassifiableFileError
        If a file matches none of the rules.
    """
    grouped = {rt: [] for rt in ReadType}
    for path in sort_by_basename(os.fspath(f) for f in files):
        basename = os.path.basename(path)
        hit = match_read_type(basename, table)
        if hit is None:
            raise UnclassifiableFileError(path, supported_read_types())
        read_type, m = hit
        grouped[read_type].append(
            ClassifiedEntry(path, read_type, basename[: m.start()])
        )

    return {
        rt: FastqGroup(rt, tuple(entries), output_filename(sample_name, rt))
        for rt, entries in grouped.items()
        if entries
    }
