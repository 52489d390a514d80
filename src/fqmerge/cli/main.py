"""fqmerge CLI entry point - dispatches subcommands."""

import argparse
import sys

from fqmerge import __version__


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="fqmerge",
        description="Classify per-lane FASTQ files by read type and merge them per sample.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command")

    from fqmerge.cli.cmd_classify import add_parser_classify
    from fqmerge.cli.cmd_merge_fastq import add_parser_merge_fastq

    add_parser_classify(subparsers)
    add_parser_merge_fastq(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
