"""Merge plan: one output record per read-type group."""

import json
import os
from dataclasses import dataclass
from typing import Tuple

from fqmerge.core.classify import classify, output_filename
from fqmerge.core.errors import InputListError
from fqmerge.core.read_types import ReadType
from fqmerge.core.validate import validate


@dataclass(frozen=True)
class OutputRecord:
    """Files to concatenate, in order, and the name of the merged file."""
    reads: Tuple[str, ...]
    filename: str

    def to_dict(self):
        return {"reads": list(self.reads), "filename": self.filename}


def build_output_records(result, sample_name):
    """Turn a validated classification into records, in R1, R2, I1, I2 order."""
    return tuple(
        OutputRecord(result[rt].paths, output_filename(sample_name, rt))
        for rt in ReadType
        if rt in result
    )


def plan_merge(files, sample_name):
    """Classify, validate and build records for one sample."""
    result = validate(classify(files, sample_name))
    return build_output_records(result, sample_name)


def records_to_json(records, indent=2):
    return json.dumps([r.to_dict() for r in records], indent=indent)


def _check_record(item):
    if not isinstance(item, dict):
        raise InputListError(f"Malformed merge plan record: {item!r}")
    reads = item.get("reads")
    filename = item.get("filename")
    if (
        not isinstance(reads, list)
        or not reads
        or not all(isinstance(r, str) for r in reads)
    ):
        raise InputListError(
            f"Merge plan record needs a non-empty list of paths in 'reads': {item!r}"
        )
    if not isinstance(filename, str) or not filename or os.sep in filename or "/" in filename:
        raise InputListError(
            f"Merge plan record needs a bare file name in 'filename': {item!r}"
        )
    return OutputRecord(tuple(reads), filename)


def records_from_json(text):
    """Parse records written by :func:`records_to_json`."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise InputListError("Merge plan must be a JSON array of records")
    return tuple(_check_record(item) for item in data)
