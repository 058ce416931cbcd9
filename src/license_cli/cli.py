"""Command-line interface for license-cli."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from license_cli import __version__
from license_cli.manifest import DEFAULT_MANIFEST

if TYPE_CHECKING:
    from license_cli.models import GenerationOutcome

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="license-cli",
        description="Generate a LICENSE file and update package.json to match.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=DEFAULT_MANIFEST,
        help="Path to the project manifest (default: package.json).",
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help=(
            "Directory containing <license>.tmpl files. "
            "Overrides the LICENSE_CLI_TEMPLATES env var. Default: bundled templates."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


def _generate_command(
    manifest_path: Path,
    templates: Path | None,
    console: Console,
) -> int:
    """Execute an interactive generation session."""
    from license_cli.generator import generate
    from license_cli.manifest import ManifestError
    from license_cli.prompter import RichPrompter
    from license_cli.render import resolve_templates_dir

    try:
        outcome = generate(
            RichPrompter(console=console),
            manifest_path,
            templates_dir=resolve_templates_dir(templates),
        )
    except (OSError, ManifestError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if outcome is None:
        return 0

    _print_outcome(outcome, console)
    return 0


def main(argv: list[str] | None = None, *, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose: bool = args.verbose
    configure_logging(verbose)

    manifest_path: Path = args.manifest
    templates: Path | None = args.templates
    return _generate_command(manifest_path, templates, console or Console())


def _print_outcome(outcome: GenerationOutcome, console: Console) -> None:
    license_id = outcome.answers.license
    if outcome.output_path is None:
        console.print(
            f"[yellow]No license file written: template for '{license_id}' "
            "could not be loaded.[/yellow]"
        )
        return

    saved = escape(str(outcome.output_path))
    console.print(f"[bright_black]File saved to: [/bright_black][yellow]{saved}")
    console.print(
        Panel(
            f"Created {license_id.upper()} license",
            box=box.ROUNDED,
            padding=1,
            style="green",
            expand=False,
        )
    )


if __name__ == "__main__":
    sys.exit(main())
