"""Cross-check read-type groups before anything is merged."""

from fqmerge.core.errors import (
    BasenameMismatchError,
    InconsistentCountError,
    NoFastqsFoundError,
)
from fqmerge.core.read_types import pattern_descriptions


def validate(result):
    """Return ``result`` unchanged if its groups line up, raise otherwise.

    A single read type is always accepted. With several read types every
    group must hold the same number of files, and the files at each
    position must share the same normalized basename, i.e. differ only
    in their read-type marker. Counts are compared before names.
    """
    if not result:
        raise NoFastqsFoundError(pattern_descriptions())
    if len(result) == 1:
        return result

    groups = list(result.values())
    counts = {g.read_type.value: len(g) for g in groups}
    if len(set(counts.values())) > 1:
        raise InconsistentCountError(counts)

    for i, row in enumerate(zip(*(g.entries for g in groups))):
        if len({e.normalized_basename for e in row}) > 1:
            raise BasenameMismatchError(
                i, [(e.read_type.value, e.path, e.normalized_basename) for e in row]
            )
    return result
