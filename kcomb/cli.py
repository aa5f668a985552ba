"""Command-line interface for kcomb."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from time import perf_counter
from typing import Any, List, Optional, Sequence

from kcomb.choose import choose
from kcomb.logging import enable_debug_logging, get_logger, set_global_log_level
from kcomb.numeric import factorial, square_wide
from kcomb.shape import chosen_shape

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _format_combination(combo: Sequence[Any]) -> str:
    return "[" + ", ".join(str(item) for item in combo) + "]"


def _run_square(x: int) -> None:
    print(f"x = {x}")
    print(f"square = {square_wide(x)}")


def _run_factorial(n: int) -> None:
    print(f"{n}! = {factorial(n)}")


def _run_shape(n: int, k: int) -> None:
    shape = chosen_shape(n, k)
    print(f"C({n},{k}) = {shape.rows}")
    print(f"shape = {shape.rows} x {shape.width}")


def _run_choose(k: int, elements: List[int], as_json: bool) -> None:
    """Enumerate and print every k-combination of ``elements``.

    Args:
        k: Combination size.
        elements: Strictly increasing integers.
        as_json: Print a single JSON array instead of one line per combination.
    """
    start = perf_counter()
    combos = choose(elements, k)
    elapsed = perf_counter() - start
    logger.info(
        f"Enumerated {len(combos)} {_plural(len(combos), 'combination')} "
        f"in {_format_duration(elapsed)}"
    )

    if as_json:
        print(json.dumps([list(combo) for combo in combos]))
        return
    for combo in combos:
        print(_format_combination(combo))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``kcomb`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="kcomb",
        description="Evaluate factorials, binomial shapes and k-combinations.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{square,factorial,shape,choose}",
        help="Available commands",
    )

    square_parser = subparsers.add_parser(
        "square", help="Square a signed 32-bit integer"
    )
    square_parser.add_argument("x", type=int, help="Value to square")

    factorial_parser = subparsers.add_parser("factorial", help="Compute n!")
    factorial_parser.add_argument("n", type=int, help="Non-negative size")

    shape_parser = subparsers.add_parser(
        "shape", help="Resolve the result shape of choosing k of n"
    )
    shape_parser.add_argument("n", type=int, help="Number of elements")
    shape_parser.add_argument("k", type=int, help="Combination size")

    choose_parser = subparsers.add_parser(
        "choose", help="Enumerate k-combinations of increasing integers"
    )
    choose_parser.add_argument("k", type=int, help="Combination size")
    choose_parser.add_argument(
        "elements", type=int, nargs="+", help="Strictly increasing integers"
    )
    choose_parser.add_argument(
        "--json", action="store_true", help="Print combinations as a JSON array"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "square":
            _run_square(args.x)
        elif args.command == "factorial":
            _run_factorial(args.n)
        elif args.command == "shape":
            _run_shape(args.n, args.k)
        elif args.command == "choose":
            _run_choose(args.k, args.elements, args.json)
    except (ValueError, OverflowError) as e:
        logger.error(f"{args.command} failed: {type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
