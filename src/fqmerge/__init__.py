"""fqmerge - consolidate per-lane FASTQ files into one file per read type."""

__version__ = "0.1.0"
