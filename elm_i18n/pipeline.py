"""Validation of command-line inputs into a single generator invocation."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from elm_i18n import translations

logger = logging.getLogger(__name__)

# Working directory for elm-codegen, so Generate.elm resolves wherever the
# tool is run from.
CODEGEN_DIR = Path(__file__).resolve().parent / "codegen"


class PipelineError(Exception):
    """Base class for user-input errors detected before generation."""


class MissingArgumentError(PipelineError):
    """A required command-line flag was absent or empty."""

    def __init__(self, flag: str, description: str) -> None:
        self.flag = flag
        super().__init__(f"Missing {description}, specify with --{flag}")


class TranslationsFileError(PipelineError):
    """The translations file could not be read or parsed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            "Error reading translations file, make sure it is a valid path "
            f"to a valid json file: {cause}"
        )


@dataclass(frozen=True)
class InvocationConfig:
    """Resolved inputs for one generator run."""

    debug: bool
    output: Path
    flags: Any
    cwd: Path


def require_arguments(args: Mapping[str, Any]) -> tuple[str, str]:
    """Check the required flags, in order.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The raw ``output`` and ``translations`` values.

    Raises:
        MissingArgumentError: For the first required flag that is missing.
    """
    output = args.get("output")
    if not output:
        raise MissingArgumentError("output", "output path")

    translations_path = args.get("translations")
    if not translations_path:
        raise MissingArgumentError("translations", "translations path")

    return output, translations_path


def build_invocation(
    args: Mapping[str, Any],
    cwd: Path | None = None,
) -> InvocationConfig:
    """Validate arguments, load the translations and assemble the invocation.

    Args:
        args: Parsed command-line arguments (``output``, ``translations``,
            ``debug``).
        cwd: Directory relative paths are resolved against. Defaults to the
            process's current working directory.

    Returns:
        The InvocationConfig to pass to the generator.

    Raises:
        MissingArgumentError: If ``output`` or ``translations`` is missing.
        TranslationsFileError: If the translations file is unreadable or
            not valid JSON.
    """
    output, translations_path = require_arguments(args)

    base = Path(cwd) if cwd is not None else Path.cwd()
    translations_file = Path(os.path.normpath((base / translations_path).absolute()))
    output_path = Path(os.path.normpath((base / output).absolute()))

    logger.debug("Reading translations from %s", translations_file)
    try:
        flags = translations.load(translations_file)
    except (OSError, ValueError) as e:
        raise TranslationsFileError(translations_file, e) from e

    return InvocationConfig(
        debug=bool(args.get("debug")),
        output=output_path,
        flags=flags,
        cwd=CODEGEN_DIR,
    )
