"""Errors raised while classifying and validating FASTQ inputs.

All of them indicate a problem with the supplied file set and are never
retried; the caller is expected to fix the input and rerun.
"""


class FastqClassificationError(ValueError):
    """Base class for classification and consistency errors."""


class UnclassifiableFileError(FastqClassificationError):
    def __init__(self, path, supported):
        self.path = path
        self.supported = list(supported)
        super().__init__(
            f"Could not determine read type of {path}; "
            f"supported read types: {', '.join(self.supported)}"
        )


class NoFastqsFoundError(FastqClassificationError):
    def __init__(self, patterns):
        self.patterns = list(patterns)
        super().__init__(
            "No FASTQ files found matching any read-type pattern "
            f"({'; '.join(self.patterns)})"
        )


class InconsistentCountError(FastqClassificationError):
    def __init__(self, counts):
        # {read type name: number of files}
        self.counts = dict(counts)
        detail = ", ".join(f"{rt}={n}" for rt, n in self.counts.items())
        super().__init__(f"Read types have different numbers of files: {detail}")


class BasenameMismatchError(FastqClassificationError):
    def __init__(self, position, entries):
        # [(read type name, path, normalized basename), ...]
        self.position = position
        self.entries = list(entries)
        detail = "; ".join(f"{rt}: {path} ({name})" for rt, path, name in self.entries)
        super().__init__(
            f"Files at position {position} do not share a common name "
            f"once the read-type marker is removed: {detail}"
        )


class InputListError(ValueError):
    """A FASTQ list side file is not a JSON array of paths."""
