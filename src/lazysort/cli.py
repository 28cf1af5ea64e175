"""Command line interface for lazysort."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, TextIO

from .adapters import lazy_sorted_by, lazy_sorted_partial
from .config import load_config, load_settings
from .engine import LazySortIterator
from .ordering import IncomparablePlacement, natural_compare, partial_compare
from .pivot import PIVOT_RULES, get_pivot_rule

logger = logging.getLogger(__name__)

ORDER_KEYS: dict[str, Callable[[str], Any]] = {
    "natural": lambda line: line,
    "length": lambda line: (len(line), line),
    "numeric": float,
}


def _read_lines(stream: TextIO) -> Iterable[str]:
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line:
            yield line


def _keyed(lines: Iterable[str], key: Callable[[str], Any]) -> list[tuple[Any, str]]:
    keyed: list[tuple[Any, str]] = []
    for lineno, line in enumerate(lines, start=1):
        try:
            keyed.append((key(line), line))
        except ValueError as exc:
            raise SystemExit(f"line {lineno}: cannot parse {line!r}: {exc}") from exc
    return keyed


def build_sorter(items: Iterable[tuple[Any, str]], cfg: dict[str, Any]) -> LazySortIterator[tuple[Any, str]]:
    """Create the iterator selected by *cfg* over ``(key, line)`` pairs."""

    pivot = get_pivot_rule(cfg["pivot"])
    if cfg.get("incomparable"):
        placement = IncomparablePlacement.coerce(cfg["incomparable"])
        return lazy_sorted_partial(
            items,
            placement,
            compare=lambda a, b: partial_compare(a[0], b[0]),
            pivot=pivot,
        )
    return lazy_sorted_by(items, lambda a, b: natural_compare(a[0], b[0]), pivot=pivot)


def cmd_sort(args: argparse.Namespace) -> None:
    settings = load_settings()
    cfg = load_config(
        args.config,
        overrides={
            "pivot": args.pivot,
            "top": args.top,
            "order": args.order,
            "incomparable": args.incomparable,
        },
    )
    cfg["pivot"] = cfg.get("pivot") or settings.pivot
    cfg["log_level"] = cfg.get("log_level") or settings.log_level
    logging.getLogger("lazysort").setLevel(cfg["log_level"].upper())

    order = cfg.get("order", "natural")
    if order not in ORDER_KEYS:
        raise SystemExit(f"Unknown order {order!r}")

    if args.input:
        with Path(args.input).open("r", encoding="utf-8") as fh:
            items = _keyed(_read_lines(fh), ORDER_KEYS[order])
    else:
        items = _keyed(_read_lines(sys.stdin), ORDER_KEYS[order])

    sorter = build_sorter(items, cfg)
    top = cfg.get("top")
    stream = sorter if top is None else itertools.islice(sorter, int(top))
    for _, line in stream:
        print(line)

    logger.info("Emitted %d of %d lines", sorter.stats.emitted, len(items))
    if args.stats:
        print(json.dumps(sorter.stats.as_dict()), file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazysort", description="Lazily sort lines of text")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sort = sub.add_parser("sort", help="Print input lines in sorted order")
    p_sort.add_argument("--config", help="YAML configuration file")
    p_sort.add_argument("--input", help="Read lines from this file instead of stdin")
    p_sort.add_argument("--top", type=int, help="Only emit the first N lines")
    p_sort.add_argument("--order", choices=sorted(ORDER_KEYS))
    p_sort.add_argument("--incomparable", choices=[p.value for p in IncomparablePlacement])
    p_sort.add_argument("--pivot", choices=sorted(PIVOT_RULES))
    p_sort.add_argument("--stats", action="store_true", help="Print sort statistics to stderr")
    p_sort.set_defaults(func=cmd_sort)

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING)
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
