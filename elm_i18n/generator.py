"""Adapter for the external elm-codegen command-line tool."""

import json
import logging
import os
import subprocess
import tempfile
from typing import Callable, Sequence

from elm_i18n.pipeline import InvocationConfig

logger = logging.getLogger(__name__)

Generator = Callable[[str, InvocationConfig], int]


def build_command(
    script_name: str,
    options: InvocationConfig,
    flags_file: str,
    command: Sequence[str] = ("elm-codegen",),
) -> list[str]:
    """Build the elm-codegen ``run`` command line.

    Args:
        script_name: Generation script, relative to ``options.cwd``.
        options: Resolved invocation options.
        flags_file: Path of the JSON file passed with ``--flags-from``.
        command: Executable (and leading arguments) that launches elm-codegen.

    Returns:
        Argument list suitable for subprocess.
    """
    args = [
        *command,
        "run",
        script_name,
        "--output",
        str(options.output),
        "--flags-from",
        flags_file,
        "--cwd",
        str(options.cwd),
    ]
    if options.debug:
        args.append("--debug")
    return args


def run(
    script_name: str,
    options: InvocationConfig,
    command: Sequence[str] = ("elm-codegen",),
) -> int:
    """Run elm-codegen once and wait for it to finish.

    The flags payload is written to a temporary JSON file for the duration of
    the call. Output of the tool is not captured.

    Args:
        script_name: Generation script, relative to ``options.cwd``.
        options: Resolved invocation options.
        command: Executable (and leading arguments) that launches elm-codegen.

    Returns:
        The exit status of the elm-codegen process.
    """
    fd, flags_file = tempfile.mkstemp(prefix="elm-i18n-flags-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(options.flags, f, ensure_ascii=False)

        args = build_command(script_name, options, flags_file, command)
        logger.debug("Launching: %s", " ".join(args))

        completed = subprocess.run(args, check=False)
    finally:
        os.unlink(flags_file)

    logger.debug("elm-codegen exited with status %d", completed.returncode)
    return completed.returncode
