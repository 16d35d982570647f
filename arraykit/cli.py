"""Command-line entry point for selecting, transforming and pairing numbers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from arraykit import transform
from arraykit.aggregate import count_pairs
from arraykit.classify import NumberKind, select

_TRANSFORMS: dict[str, Callable[[list[int]], list[int]]] = {
    "reverse": transform.reverse,
    "rotate": transform.rotate_right,
    "sort-asc": transform.sort_ascending,
    "sort-desc": transform.sort_descending,
    "group-negatives": transform.group_negatives,
    "cubes": transform.cubes,
    "squares": transform.squares,
    "digit-sums": transform.digit_sums,
    "reversed-numbers": transform.reversed_numbers,
}

NO_MATCH = "No Element Found in Array"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arraykit", description="Work with sequences of integers."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    pick = commands.add_parser("select", help="keep the numbers of one kind")
    pick.add_argument("kind", choices=[kind.value for kind in NumberKind])
    pick.add_argument("values", nargs="+", type=int)

    change = commands.add_parser("transform", help="transform the numbers")
    change.add_argument("operation", choices=sorted(_TRANSFORMS))
    change.add_argument("values", nargs="+", type=int)

    pairs = commands.add_parser("pairs", help="count pairs adding up to a total")
    pairs.add_argument("total", type=int)
    pairs.add_argument("values", nargs="+", type=int)

    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "select":
        chosen = select(args.values, args.kind)
        return "\t".join(map(str, chosen)) if chosen else NO_MATCH
    if args.command == "transform":
        return " ".join(map(str, _TRANSFORMS[args.operation](args.values)))
    return f"Count of pairs is {count_pairs(args.values, args.total)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given by ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        output = _run(args)
    except ValueError as error:
        print(f"arraykit: {error}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())