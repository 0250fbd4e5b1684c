"""Resolving command-line input into a :class:`ScriptInput`."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from cargo_script.constants.config import DEFAULT_SEARCH_EXTENSIONS
from cargo_script.exceptions import ScriptNotFoundError, UserError
from cargo_script.io import file_last_modified_ms
from cargo_script.model import ExprInput, FileInput, LoopInput, ScriptInput

logger = logging.getLogger(__name__)

UNKNOWN_SCRIPT_NAME: str = "unknown"


def find_script(path: Path, search_extensions: Sequence[str] = DEFAULT_SEARCH_EXTENSIONS) -> Path | None:
    """Locate a script, trying each search extension when ``path`` has none."""
    if path.is_file():
        return path

    if path.suffix:
        return None

    for extension in search_extensions:
        candidate = path.with_suffix(f".{extension}")
        if candidate.is_file():
            return candidate
    return None


def load_file_input(path: Path, search_extensions: Sequence[str] = DEFAULT_SEARCH_EXTENSIONS) -> FileInput:
    """Read a script file into a :class:`FileInput`."""
    found = find_script(path, search_extensions)
    if found is None:
        raise ScriptNotFoundError(f"could not find script: {path}")

    try:
        content = found.read_text(encoding="utf-8")
        modified = file_last_modified_ms(found)
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptNotFoundError(f"could not read script {found}: {exc}") from exc

    absolute = found if found.is_absolute() else Path.cwd() / found
    return FileInput(
        name=found.stem or UNKNOWN_SCRIPT_NAME,
        path=absolute,
        content=content,
        modified=modified,
    )


def resolve_input(
    script: str,
    *,
    expr: bool = False,
    loop: bool = False,
    count: bool = False,
    search_extensions: Sequence[str] = DEFAULT_SEARCH_EXTENSIONS,
) -> ScriptInput:
    """Interpret the ``<script>`` argument according to ``--expr``/``--loop``."""
    if expr and loop:
        raise UserError("cannot specify both --expr and --loop")

    if expr:
        script_input: ScriptInput = ExprInput(content=script)
    elif loop:
        script_input = LoopInput(content=script, count=count)
    else:
        script_input = load_file_input(Path(script), search_extensions)

    logger.info("input: %r", script_input)
    return script_input
