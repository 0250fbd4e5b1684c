"""Thin wrapper around ``cargo build``."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from cargo_script.constants.config import DEFAULT_CARGO_EXECUTABLE
from cargo_script.constants.splitting import CRATE_NAME_PATTERN_TEMPLATE, EXTERN_PATTERN
from cargo_script.exceptions import ToolchainError

logger = logging.getLogger(__name__)


class CargoToolchain:
    """Builds generated packages with Cargo."""

    def __init__(self, executable: str = DEFAULT_CARGO_EXECUTABLE) -> None:
        self.executable = executable

    def build(self, manifest_path: Path, *, debug: bool) -> None:
        """Build the package, optimised unless ``debug`` is set."""
        command = [self.executable, "build", "--manifest-path", str(manifest_path)]
        if not debug:
            command.append("--release")

        logger.info("running %s", " ".join(command))
        try:
            completed = subprocess.run(command, check=False)
        except OSError as exc:
            raise ToolchainError(f"failed to launch {self.executable}: {exc}") from exc
        _check_status(self.executable, completed.returncode)

    def capture_verbose_build(self, manifest_path: Path) -> str:
        """Run a verbose debug build and return everything Cargo printed."""
        command = [self.executable, "build", "--verbose", "--manifest-path", str(manifest_path)]

        logger.info("running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise ToolchainError(f"failed to launch {self.executable}: {exc}") from exc
        _check_status(self.executable, completed.returncode)
        return completed.stdout + completed.stderr


def extract_lib_names(build_output: str, crate_name: str) -> list[str]:
    """Return the ``--extern`` library names Cargo passed when compiling ``crate_name``."""
    pattern = re.compile(CRATE_NAME_PATTERN_TEMPLATE.format(name=re.escape(crate_name)))
    match = pattern.search(build_output)
    if match is None:
        raise ToolchainError(f"could not find the rustc invocation for '{crate_name}' in cargo output")
    return EXTERN_PATTERN.findall(match.group(1))


def _check_status(executable: str, returncode: int) -> None:
    if returncode == 0:
        return
    if returncode < 0:
        raise ToolchainError(f"{executable} failed")
    raise ToolchainError(f"{executable} failed with status {returncode}")
