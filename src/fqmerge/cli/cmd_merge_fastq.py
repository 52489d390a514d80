"""fqmerge merge-fastq - merge FASTQ files across lanes."""

import os
import sys

from fqmerge.cli.common import add_input_arguments, gather_inputs, has_inputs


def add_parser_merge_fastq(subparsers):
    p = subparsers.add_parser(
        "merge-fastq",
        help="Merge FASTQ files across lanes by read type.",
    )
    add_input_arguments(p, sample_required=False)
    p.add_argument(
        "--plan",
        default=None,
        help="Merge plan JSON written by 'fqmerge classify' (replaces --sample and "
        "the FASTQ inputs).",
    )
    p.add_argument("--output-dir", required=True, help="Directory for merged output.")
    p.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Read types merged in parallel (default: all).",
    )
    p.add_argument(
        "--threads",
        type=int,
        default=os.cpu_count(),
        help="Total pigz threads, shared across jobs.",
    )
    p.add_argument(
        "--compresslevel",
        type=int,
        choices=range(1, 10),
        default=6,
        metavar="{1..9}",
        help="gzip compression level (default: 6).",
    )
    p.add_argument(
        "--summary",
        default=None,
        help="Write a tab-separated summary of merged files.",
    )
    p.add_argument(
        "--count-reads",
        action="store_true",
        help="Count reads in each merged file (slow on large inputs).",
    )
    p.set_defaults(func=merge_cmd)


def merge_cmd(args):
    from fqmerge.core.merge_fastq import merge_fastqs, merge_records
    from fqmerge.core.records import records_from_json
    from fqmerge.core.summary import write_summary

    options = dict(
        jobs=args.jobs,
        threads=args.threads,
        compresslevel=args.compresslevel,
        with_read_counts=args.count_reads,
    )
    if args.plan:
        if args.sample or has_inputs(args):
            raise ValueError(
                "--plan cannot be combined with --sample or FASTQ inputs"
            )
        with open(args.plan) as fh:
            records = records_from_json(fh.read())
        results = merge_records(records, args.output_dir, **options)
    else:
        if not args.sample:
            raise ValueError("--sample is required unless --plan is given")
        results = merge_fastqs(
            gather_inputs(args), args.sample, args.output_dir, **options
        )

    for r in results:
        reads = "" if r.n_reads is None else f" ({r.n_reads:,} reads)"
        print(f"[info] wrote {r.path}{reads}", file=sys.stderr)
    if args.summary:
        write_summary(results, args.summary)
