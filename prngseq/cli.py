"""Command line driver: write a generated sequence to a CSV file."""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from . import __version__
from .core.generator import BaseGenerator, UINT64_MASK
from .core.output import write_sequence
from .core.registry import PluginRegistry
from .errors import OutputUnopenableError, OutputWriteError, PrngSeqError

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")


def _parse_unsigned(value: str) -> int:
    """Accept a non-negative decimal integer, rejecting anything else."""

    text = value.strip()
    if not _UNSIGNED.fullmatch(text):
        raise argparse.ArgumentTypeError(
            f"Expected a non-negative decimal integer, received '{value}'."
        )
    return int(text)


def _parse_seed(value: str) -> int:
    seed = _parse_unsigned(value)
    if seed > UINT64_MASK:
        raise argparse.ArgumentTypeError(f"Seed must fit in 64 bits, received '{value}'.")
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prngseq",
        description="Write a deterministic pseudo-random sequence as a one-column CSV file",
        epilog="generators: lcg, randu, xorshift32, mt19937",
    )
    parser.add_argument("generator", help="Generator name (case-sensitive)")
    parser.add_argument("seed", type=_parse_seed, help="Seed, a non-negative integer below 2**64")
    parser.add_argument("count", metavar="N", type=_parse_unsigned, help="Number of values to write")
    parser.add_argument("output", type=Path, help="Output CSV path, created or truncated")
    parser.add_argument(
        "--format",
        dest="float_format",
        metavar="SPEC",
        default=None,
        help="Python format spec for each value (e.g. .6g); shortest round-trip repr by default",
    )
    parser.add_argument("--multiplier", type=_parse_unsigned, help="LCG multiplier a")
    parser.add_argument("--increment", type=_parse_unsigned, help="LCG increment c")
    parser.add_argument("--modulus", type=_parse_unsigned, help="LCG modulus m")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _config_fields(args: argparse.Namespace) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"seed": args.seed, "count": args.count}
    for key in ("float_format", "multiplier", "increment", "modulus"):
        value = getattr(args, key)
        if value is not None:
            fields[key] = value
    return fields


def build_generator(args: argparse.Namespace) -> BaseGenerator:
    """Resolve the generator name and validate its config.

    Raises UnknownGeneratorError or pydantic's ValidationError; nothing on
    disk is touched here.
    """
    config_class = PluginRegistry.config_class(args.generator)
    config = config_class(**_config_fields(args))
    return PluginRegistry.create_generator(args.generator, config)


def write_output(generator: BaseGenerator, path: Path) -> int:
    try:
        handle = path.open("w", newline="", encoding="utf-8")
    except OSError as exc:
        raise OutputUnopenableError(path, exc.strerror or str(exc)) from exc

    try:
        with handle:
            return write_sequence(generator, handle)
    except OSError as exc:
        # Devices such as /dev/full are left alone; only a partial file is removed.
        if path.is_file():
            path.unlink()
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    PluginRegistry.discover_generators()

    try:
        generator = build_generator(args)
    except PrngSeqError as exc:
        print(f"prngseq: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"prngseq: invalid configuration for {args.generator}:\n{exc}", file=sys.stderr)
        return 1

    logger.info("Generating %d values with %s (seed=%d)", args.count, args.generator, args.seed)

    try:
        written = write_output(generator, args.output)
    except (OutputUnopenableError, OutputWriteError) as exc:
        print(f"prngseq: {exc}", file=sys.stderr)
        return 1

    logger.info("Wrote %d values to %s", written, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
