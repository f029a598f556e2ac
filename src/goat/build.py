"""Commands run inside a freshly generated project."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import BuildStepError

__all__ = ["CommandResult", "run_command"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    command: tuple[str, ...]
    directory: Path
    output: str


def run_command(directory: str | Path, command: Sequence[str]) -> CommandResult:
    """Run ``command`` with ``directory`` as its working directory.

    Standard output and standard error are captured together. A missing
    executable or a non-zero exit status raises
    :class:`~goat.errors.BuildStepError` carrying the captured output.
    """

    argv = tuple(command)
    if not argv:
        raise ValueError("command must not be empty")

    directory = Path(directory)
    display = " ".join(argv)
    LOGGER.info("Running %r in %s", display, directory)
    try:
        completed = subprocess.run(
            argv,
            cwd=directory,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise BuildStepError(f"failed to run '{display}': {exc}", command=argv) from exc
    except subprocess.CalledProcessError as exc:
        output = exc.stdout or ""
        raise BuildStepError(
            f"failed to run '{display}': exit status {exc.returncode}\nOutput: {output}",
            command=argv,
            output=output,
        ) from exc

    LOGGER.info("%r completed successfully", display)
    return CommandResult(command=argv, directory=directory, output=completed.stdout or "")
