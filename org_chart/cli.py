"""
Build an org chart from an employee CSV / Excel export.

Usage:
    org-chart employees.csv
    org-chart staff.xlsx --group-by organization --graph org_chart --split
    org-chart employees.csv --json org_data.json
"""

import argparse
import json
import logging
import os
import sys

from .config import OUTPUT_FORMAT, RANKDIR, THEMES
from .errors import OrgChartError
from .forest import GROUP_FIELDS, forest_to_dicts, groups_to_dicts
from .normalize import POLICIES
from .pipeline import load_forest, load_forests_by_group
from .render import (
    format_tree,
    forest_to_digraph,
    groups_to_digraph,
    render_digraph,
    unique_names,
)

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="org-chart",
        description="Reconstruct reporting lines from a flat employee table and draw them.",
        epilog="The table needs id and name columns; manager_id, position, department, "
               "organization and image_url are optional.",
    )
    parser.add_argument("input", help="Path to the .csv or .xlsx employee file")
    parser.add_argument("--sheet", default=0,
                        help="Excel sheet name or index (default: first sheet)")
    parser.add_argument("--group-by", choices=GROUP_FIELDS, default=None,
                        help="Build one chart per value of this field")
    parser.add_argument("--policy", choices=POLICIES, default="strict",
                        help="strict drops rows without id or name (default: strict)")
    parser.add_argument("--allow-duplicate-ids", action="store_true",
                        help="Keep the last row for a repeated id instead of failing")
    parser.add_argument("--keep-self-references", action="store_true",
                        help="Do not turn self-managed employees into roots")
    parser.add_argument("--json", metavar="PATH", help="Write the hierarchy as JSON")
    parser.add_argument("--graph", metavar="PREFIX",
                        help="Render the chart with Graphviz to PREFIX.<format>")
    parser.add_argument("--format", choices=["png", "pdf", "svg"], default=OUTPUT_FORMAT)
    parser.add_argument("--rankdir", choices=["TB", "LR"], default=RANKDIR)
    parser.add_argument("--theme", choices=sorted(THEMES), default="light")
    parser.add_argument("--split", action="store_true",
                        help="With --group-by, write one graph file per group")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _sheet(value):
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


def run(args):
    forest_options = {
        "duplicates": "overwrite" if args.allow_duplicate_ids else "reject",
        "break_self_references": not args.keep_self_references,
    }
    sheet = _sheet(args.sheet)

    if args.group_by:
        groups = load_forests_by_group(args.input, key=args.group_by, sheet_name=sheet,
                                       policy=args.policy, **forest_options)
        data = groups_to_dicts(groups)
    else:
        forest = load_forest(args.input, sheet_name=sheet, policy=args.policy, **forest_options)
        groups = None
        data = forest_to_dicts(forest)

    if args.json:
        with open(args.json, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        print(f"Saved {args.json}")

    if args.graph:
        style = {"rankdir": args.rankdir, "theme": args.theme, "fmt": args.format}
        if groups is None:
            paths = [render_digraph(forest_to_digraph(forest, **style), args.graph)]
        elif args.split:
            suffixes = unique_names(groups)
            paths = [
                render_digraph(forest_to_digraph(group_forest, title=label, **style),
                               f"{args.graph}_{suffix}")
                for (label, group_forest), suffix in zip(groups.items(), suffixes)
            ]
        else:
            paths = [render_digraph(groups_to_digraph(groups, **style), args.graph)]
        for path in paths:
            print(f"Org chart generated: {path}")

    if not args.json and not args.graph:
        if groups is None:
            print(format_tree(forest))
        else:
            for label, group_forest in groups.items():
                print(f"== {label} ==")
                print(format_tree(group_forest))


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    if not os.path.exists(args.input):
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        run(args)
    except OrgChartError as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
