"""fqmerge classify - print the merge plan for a set of FASTQ files."""

import sys

from fqmerge.cli.common import add_input_arguments, gather_inputs


def add_parser_classify(subparsers):
    p = subparsers.add_parser(
        "classify",
        help="Group FASTQs by read type and print the merge plan as JSON.",
    )
    add_input_arguments(p)
    p.add_argument(
        "--output",
        default=None,
        help="Write the plan to this file instead of stdout.",
    )
    p.set_defaults(func=classify_cmd)


def classify_cmd(args):
    from fqmerge.core.records import plan_merge, records_to_json

    records = plan_merge(gather_inputs(args), args.sample)
    text = records_to_json(records)
    if args.output:
        with open(args.output, "w") as fh:
            fh.write(text + "\n")
        print(f"Wrote plan for {len(records)} read types to {args.output}", file=sys.stderr)
    else:
        print(text)
