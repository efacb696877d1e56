"""Command-line interface for cukexp."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from cukexp.errors import ExpressionError

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    expressions: list[str]
    format: str
    sentinels: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cukexp",
        description="Tokenize Cucumber Expressions",
    )
    p.add_argument("expressions", nargs="*", metavar="EXPRESSION", help="Expression to tokenize")
    p.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        metavar="FILE",
        help="Read expressions from FILE, one per line (repeatable)",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--no-sentinels",
        dest="sentinels",
        action="store_false",
        default=None,
        help="Omit START_OF_LINE and END_OF_LINE tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover cukexp.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "cukexp.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def read_expressions(path: Path) -> list[str]:
    """Read one expression per line, skipping blank lines and # comments."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip() and not line.lstrip().startswith("#")]


def resolve_options(args: argparse.Namespace, cwd: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, cwd if cwd is not None else Path("."))
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    fmt = "text"
    sentinels = True
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format}")
            fmt = cfg_format
        cfg_sentinels = cfg_output.get("sentinels")
        if cfg_sentinels is not None:
            if not isinstance(cfg_sentinels, bool):
                raise argparse.ArgumentTypeError(
                    f"invalid sentinels value in config (expected true or false): {cfg_sentinels}"
                )
            sentinels = cfg_sentinels
    if args.format is not None:
        fmt = args.format
    if args.sentinels is not None:
        sentinels = args.sentinels

    expressions = list(args.expressions)
    for name in args.file:
        try:
            expressions.extend(read_expressions(Path(name)))
        except OSError as exc:
            raise argparse.ArgumentTypeError(f"cannot read {name}: {exc.strerror}") from exc

    return CliOptions(
        expressions=expressions,
        format=fmt,
        sentinels=sentinels,
        verbose=args.verbose,
    )


def run(options: CliOptions, out: TextIO, err: TextIO) -> int:
    """Tokenize every expression, writing tokens to out and errors to err."""
    from cukexp.debug import dump_tokens, tokens_to_json, visible_tokens
    from cukexp.lexer import tokenize

    status = 0
    results: list[dict[str, Any]] = []
    for expression in options.expressions:
        logger.debug("tokenizing %r", expression)
        try:
            tokens = visible_tokens(tokenize(expression), options.sentinels)
        except ExpressionError as exc:
            status = 1
            if options.format == "json":
                results.append(
                    {"expression": expression, "error": exc.message, "index": exc.index}
                )
            else:
                print(str(exc), file=err)
            continue

        if options.format == "json":
            results.append({"expression": expression, "tokens": tokens_to_json(tokens)})
        else:
            out.write(f"{expression}\n")
            dump_tokens(tokens, file=out)

    if options.format == "json":
        json.dump(results, out, ensure_ascii=False, indent=2)
        out.write("\n")
    return status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if not options.expressions:
        print("error: no expressions given", file=sys.stderr)
        return 2

    return run(options, sys.stdout, sys.stderr)


def _entry() -> None:
    sys.exit(main())
