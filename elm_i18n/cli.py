"""CLI orchestration: wires arguments, translations, and elm-codegen together."""

import argparse
import functools
import logging
from pathlib import Path
from typing import NoReturn, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from elm_i18n import generator as codegen
from elm_i18n.config import load_config
from elm_i18n.pipeline import PipelineError, build_invocation

console = Console(stderr=True)


def setup_logging(debug: bool = False) -> None:
    """Configure logging with rich handler for colored, readable output."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments, ignoring flags the tool does not know.

    Required flags are not enforced here so that a missing one is reported
    by the pipeline with its own diagnostic.
    """
    parser = argparse.ArgumentParser(
        prog="elm-i18n",
        description="Generate Elm translation modules from a JSON file using elm-codegen",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const="",
        help="Output path for the generated Elm source (required)",
    )
    parser.add_argument(
        "--translations",
        nargs="?",
        const="",
        help="Path to the translations JSON file (required)",
    )
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        default=False,
        help="Run elm-codegen in debug mode; any value given counts as enabled",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to the YAML configuration file (default: elm-i18n.yaml if present)",
    )
    args, _unknown = parser.parse_known_args(argv)
    return args


def _fail(label: str, error: Exception) -> NoReturn:
    console.print(f"[red bold]{label}:[/red bold] {escape(str(error))}", soft_wrap=True, highlight=False)
    raise SystemExit(1)


def run(
    argv: Sequence[str] | None = None,
    generator: codegen.Generator | None = None,
    cwd: Path | None = None,
) -> None:
    """Main synchronous entry point for the CLI.

    Validates the arguments, loads the translations and hands them to the
    generator. User-input errors exit with status 1; a non-zero status from
    the generator is passed through unchanged, and a generator killed by a
    signal exits with 128 plus the signal number.

    Args:
        argv: Command-line arguments without the program name.
        generator: Callable invoked as ``generator(script_name, options)``.
            Defaults to running elm-codegen with the configured command.
        cwd: Directory relative paths are resolved against.
    """
    args = parse_args(argv)
    setup_logging(bool(args.debug))
    logger = logging.getLogger(__name__)

    try:
        try:
            options = build_invocation(vars(args), cwd)
            config = load_config(args.config)
        except (PipelineError, FileNotFoundError) as e:
            _fail("Error", e)
        except ValueError as e:
            _fail("Configuration error", e)

        logger.debug("Configuration loaded (generator: %s)", " ".join(config.generator.command))
        if generator is None:
            generator = functools.partial(codegen.run, command=config.generator.command)

        logger.info("Generating Elm sources into %s", options.output)
        status = generator(config.generator.script, options)

    except KeyboardInterrupt:
        console.print("\n[yellow]Generation cancelled by user.[/yellow]")
        raise SystemExit(130)

    if status < 0:
        # Killed by a signal; report it the way a shell would.
        status = 128 - status
    if status:
        raise SystemExit(status)


def main() -> None:
    """Console script entry point."""
    run()
