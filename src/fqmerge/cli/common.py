"""Input options shared by the classify and merge-fastq subcommands."""


def add_input_arguments(p, sample_required=True):
    p.add_argument("fastqs", nargs="*", help="FASTQ files (.fastq.gz / .fq.gz).")
    p.add_argument(
        "--sample", required=sample_required, help="Sample name for merged outputs."
    )
    p.add_argument(
        "--fastq-list",
        default=None,
        help="JSON file holding an array of FASTQ paths.",
    )
    p.add_argument(
        "--input-dir",
        default=None,
        help="Directory to scan for FASTQ files.",
    )
    p.add_argument(
        "--prefix",
        default=None,
        help="With --input-dir, only use files named {prefix}_*.",
    )


def gather_inputs(args):
    """Collect FASTQ paths from positional args, --fastq-list and --input-dir."""
    from fqmerge.core.inputs import discover_fastqs, load_fastq_list

    files = list(args.fastqs)
    if args.fastq_list:
        files.extend(load_fastq_list(args.fastq_list))
    if args.input_dir:
        files.extend(discover_fastqs(args.input_dir, args.prefix))
    return files


def has_inputs(args):
    return bool(args.fastqs or args.fastq_list or args.input_dir)
