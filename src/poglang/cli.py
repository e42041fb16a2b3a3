"""Command-line interface for poglang."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from poglang.errors import LexError
from poglang.tokens import Token

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="poglang",
        description="poglang lexer: print the token stream of a source file",
    )
    p.add_argument("input", help="Input .pog file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default=None,
        metavar="FORMAT",
        help="Output format: text or json (default: text)",
    )
    p.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject words that would otherwise be dropped (default: off)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover poglang.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens with spans to stderr")
    return p


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    if s not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise argparse.ArgumentTypeError(f"invalid output format '{s}' (expected one of: {choices})")
    return s


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "poglang.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def config_strict(config: dict[str, Any]) -> bool:
    """Return the ``[lexer] strict`` setting, ignoring non-boolean values."""
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_strict = cfg_lexer.get("strict")
        if isinstance(cfg_strict, bool):
            return cfg_strict
    return False


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Strict mode: config < CLI
    strict = config_strict(config)
    if args.strict is not None:
        strict = args.strict

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if isinstance(cfg_format, str):
            output_format = parse_format_arg(cfg_format)
    if args.format is not None:
        output_format = parse_format_arg(args.format)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        strict=strict,
        debug=args.debug,
    )


def render_tokens(tokens: Sequence[Token], output_format: str) -> str:
    """Serialize a token sequence in the requested output format."""
    if output_format == "json":
        records = [
            {
                "type": tok.type.name,
                "value": tok.value,
                "line": tok.span.start.line,
                "column": tok.span.start.column,
            }
            for tok in tokens
        ]
        return json.dumps(records, indent=2) + "\n"

    from poglang.debug import format_token

    return "".join(format_token(tok) + "\n" for tok in tokens)


def lex_file(options: CliOptions) -> str:
    """Read and tokenize a poglang file, returning the rendered token stream."""
    from poglang.debug import dump_tokens
    from poglang.lexer import tokenize

    source = options.input_file.read_text(encoding="utf-8")
    tokens = tokenize(source, str(options.input_file), strict=options.strict)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return render_tokens(tokens, options.output_format)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        output = lex_file(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
