"""Command-line interface for converting JSON documents to TypeScript."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import tyro
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from ._config import ConversionConfig
from ._convert import SAMPLE_JSON, convert, validate_json
from ._errors import Json2TsError

CONSOLE = Console(stderr=True)


def _print_error(message: str) -> None:
    CONSOLE.print(f"[bold red](json2ts) Error:[/bold red] {escape(message)}")


def main(
    input: Optional[Path] = None,
    output: Optional[Path] = None,
    sample: bool = False,
    check: bool = False,
    config: ConversionConfig = ConversionConfig(),
) -> int:
    """Generate TypeScript declarations from a JSON document.

    Args:
        input: JSON file to read. Reads from stdin if not set.
        output: File to write the declarations to, e.g. `types.ts`. Prints to
            stdout if not set.
        sample: Convert a bundled sample document instead of reading input.
        check: Only check that the input is valid JSON.
        config: Conversion options.

    Returns:
        Process exit code.
    """
    if sample:
        text = SAMPLE_JSON
    elif input is not None:
        try:
            text = input.read_text(encoding="utf-8")
        except OSError as e:
            _print_error(f"Could not read {input}: {e}")
            return 1
    else:
        text = sys.stdin.read()

    if check:
        message = validate_json(text)
        if message is None and not text.strip():
            message = "Input is empty."
        if message is not None:
            _print_error(message)
            return 1
        CONSOLE.print("[bold](json2ts)[/bold] Input is valid JSON.")
        return 0

    try:
        declarations = convert(text, config)
    except Json2TsError as e:
        _print_error(str(e))
        return 1

    if output is not None:
        output.write_text(declarations + "\n", encoding="utf-8")
        CONSOLE.print(
            f"[bold](json2ts)[/bold] Wrote declarations to {escape(str(output))}"
        )
    elif sys.stdout.isatty():
        Console().print(Syntax(declarations, "typescript"))
    else:
        sys.stdout.write(declarations + "\n")
    return 0


def entrypoint() -> None:
    """Entrypoint for use with pyproject scripts."""
    sys.exit(tyro.cli(main))
