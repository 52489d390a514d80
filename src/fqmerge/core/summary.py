"""Tabulate merged outputs."""

import pandas as pd
import pysam

SUMMARY_COLUMNS = ["filename", "path", "n_inputs", "n_reads"]


def count_reads(path):
    """Number of FASTQ records in ``path`` (.fastq or .fastq.gz)."""
    n = 0
    with pysam.FastxFile(str(path)) as fh:
        for _ in fh:
            n += 1
    return n


def summarize_merge(results):
    """One row per merged file."""
    rows = [
        {
            "filename": r.filename,
            "path": r.path,
            "n_inputs": r.n_inputs,
            "n_reads": r.n_reads,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary(results, output_path):
    summarize_merge(results).to_csv(output_path, sep="\t", index=False)
