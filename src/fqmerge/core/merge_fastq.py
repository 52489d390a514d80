"""Merge FASTQ files across lanes, one merged file per read type."""

import os
import shutil
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fqmerge.core.classify import classify
from fqmerge.core.fastq_io import open_gz_reader, open_gz_writer
from fqmerge.core.records import build_output_records
from fqmerge.core.summary import count_reads
from fqmerge.core.validate import validate


@dataclass(frozen=True)
class MergeResult:
    filename: str
    path: str
    n_inputs: int
    n_reads: Optional[int] = None


def merge_record(record, output_dir, threads=None, compresslevel=6):
    """Decompress ``record.reads`` in order and recompress them as one file.

    The merged file is first written under a hidden temporary name in
    ``output_dir`` and renamed to ``record.filename`` once complete.

    Returns the path of the merged file.
    """
    if threads is None:
        threads = os.cpu_count()
    missing = [f for f in record.reads if not os.path.isfile(f)]
    if missing:
        raise FileNotFoundError(f"Input FASTQ not found: {', '.join(missing)}")

    outfile = Path(output_dir) / record.filename
    tmpfile = outfile.with_name(f".{outfile.name}.tmp")
    try:
        with open_gz_writer(tmpfile, threads=threads, compresslevel=compresslevel) as out_fh:
            for f in record.reads:
                with open_gz_reader(f) as in_fh:
                    shutil.copyfileobj(in_fh, out_fh)
        os.replace(tmpfile, outfile)
    finally:
        if tmpfile.exists():
            tmpfile.unlink()
    return str(outfile)


def merge_records(
    records,
    output_dir,
    jobs=None,
    threads=None,
    compresslevel=6,
    with_read_counts=False,
):
    """Merge every record concurrently, one task per record.

    Parameters
    ----------
    records : sequence of OutputRecord
    output_dir : str or Path
        Created if missing.
    jobs : int or None
        Worker count (default: one per record).
    threads : int or None
        Total pigz threads, split across workers (default: all CPUs).
    with_read_counts : bool
        Count the reads of each merged file.

    Returns a list of MergeResult in record order. The first failing
    merge is re-raised once all tasks have finished.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    if not records:
        return []
    if threads is None:
        threads = os.cpu_count()
    if jobs is None:
        jobs = len(records)
    jobs = max(1, min(jobs, len(records)))
    per_task_threads = max(1, threads // jobs)

    def _run(record):
        print(
            f"Merging {len(record.reads)} files for {record.filename}",
            file=sys.stderr,
        )
        path = merge_record(
            record, output_dir, threads=per_task_threads, compresslevel=compresslevel
        )
        n_reads = count_reads(path) if with_read_counts else None
        return MergeResult(record.filename, path, len(record.reads), n_reads)

    with ThreadPoolExecutor(max_workers=jobs) as pool:
        futures = [pool.submit(_run, r) for r in records]

    # Executor has joined; surface the first failure in record order.
    return [fut.result() for fut in futures]


def merge_fastqs(files, sample_name, output_dir, **kwargs):
    """Plan and merge the FASTQs of one sample.

    Any classification error is raised before a merge is started.
    """
    result = validate(classify(files, sample_name))
    records = build_output_records(result, sample_name)

    print(f"Sample:  {sample_name}", file=sys.stderr)
    print(f"Output:  {output_dir}", file=sys.stderr)
    print(
        f"Read types detected: {' '.join(rt.value for rt in result)}",
        file=sys.stderr,
    )
    return merge_records(records, output_dir, **kwargs)
