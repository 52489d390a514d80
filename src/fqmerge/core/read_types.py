"""Read types and the ordered filename pattern table used to detect them.

Rules are tried in order (R1, R2, I1, I2) against the lower-cased
basename; the first rule that matches decides the read type. Each rule
looks for a read-type marker at the tail of the name, optionally
followed by an Illumina chunk number, followed by the gzip FASTQ
extension:

    sample_S1_L001_R1_001.fastq.gz   -> R1
    sample.R2.fq.gz                  -> R2
    sample_1.fastq.gz                -> R1
    sample_L002_I1_001.fastq.gz      -> I1

Matching is a substring search, so a name such as ``run_R2_1.fastq.gz``
is taken as R1 (``_1`` is tested before ``R2``).
"""

import re
from enum import Enum


class ReadType(Enum):
    """Sequencing read types, in matching priority order."""
    R1 = "R1"
    R2 = "R2"
    I1 = "I1"
    I2 = "I2"


FASTQ_EXTENSION = r"\.f(?:ast)?q\.gz$"
CHUNK_SUFFIX = r"(?:_\d{3})?"

PATTERN_TABLE = (
    (re.compile(rf"(?:[_.]?r1|_1){CHUNK_SUFFIX}{FASTQ_EXTENSION}", re.IGNORECASE), ReadType.R1),
    (re.compile(rf"(?:[_.]?r2|_2){CHUNK_SUFFIX}{FASTQ_EXTENSION}", re.IGNORECASE), ReadType.R2),
    (re.compile(rf"[_.]?i1{CHUNK_SUFFIX}{FASTQ_EXTENSION}", re.IGNORECASE), ReadType.I1),
    (re.compile(rf"[_.]?i2{CHUNK_SUFFIX}{FASTQ_EXTENSION}", re.IGNORECASE), ReadType.I2),
)


def match_read_type(basename: str, table=PATTERN_TABLE):
    """Return ``(read_type, match)`` for the first matching rule, or None."""
    lowered = basename.lower()
    for pattern, read_type in table:
        m = pattern.search(lowered)
        if m:
            return read_type, m
    return None


def supported_read_types():
    return [rt.value for rt in ReadType]


def pattern_descriptions(table=PATTERN_TABLE):
    """Human-readable ``R1: <regex>`` lines, for error messages."""
    return [f"{rt.value}: {pattern.pattern}" for pattern, rt in table]
