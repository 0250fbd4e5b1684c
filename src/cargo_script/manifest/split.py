"""Splitting script input into an embedded manifest and Rust source."""

from __future__ import annotations

import logging

from cargo_script.constants.splitting import (
    DIVIDER_CHAR,
    DIVIDER_MIN_DASHES,
    INNER_ATTRIBUTE_PREFIX,
    SHEBANG_PREFIX,
    SOURCE_MARKERS,
)
from cargo_script.constants.templates import (
    EXPR_TEMPLATE,
    FILE_TEMPLATE,
    LOOP_COUNT_TEMPLATE,
    LOOP_TEMPLATE,
    SOURCE_PLACEHOLDER,
)
from cargo_script.exceptions import NoSourceFoundError
from cargo_script.model import ExprInput, FileInput, LoopInput, ScriptInput

logger = logging.getLogger(__name__)


def split_input(script_input: ScriptInput) -> tuple[str, str]:
    """Return ``(manifest_fragment, source)`` for an input.

    Expressions and loop closures never carry an embedded manifest.
    """
    if isinstance(script_input, FileInput):
        return split_script_content(script_input.content)
    if isinstance(script_input, (ExprInput, LoopInput)):
        return "", script_input.content
    raise TypeError(f"Unsupported input type: {type(script_input).__name__}")


def split_script_content(content: str) -> tuple[str, str]:
    """Split script file content into manifest fragment and source.

    A leading hashbang line (but not an inner attribute such as ``#![feature]``)
    is dropped and belongs to neither part. A divider line (whitespace plus at
    least three dashes) ends the scan and is dropped. Otherwise the source
    starts at the last line that begins with a source marker, so a fragment
    can itself hold marker-looking lines such as ``// cargo-deps`` comments.
    """
    lines = _lines_with_endings(content)
    offset = 0
    manifest_start = 0
    if lines and lines[0].startswith(SHEBANG_PREFIX) and not lines[0].startswith(INNER_ATTRIBUTE_PREFIX):
        offset = manifest_start = len(lines[0])
        lines = lines[1:]

    source_start: int | None = None
    for line in lines:
        if _is_divider(line):
            logger.info("splitting because of dash divider in line %r", line)
            return content[manifest_start:offset], content[offset + len(line) :]

        marker = _source_marker(line)
        if marker is not None:
            logger.info("splitting because of marker %r", marker)
            source_start = offset

        offset += len(line)

    if source_start is None:
        raise NoSourceFoundError("could not locate start of Rust source in script")
    return content[manifest_start:source_start], content[source_start:]


def wrap_source(script_input: ScriptInput, source: str) -> str:
    """Substitute ``source`` into the template for the input's variant."""
    return _template_for(script_input).replace(SOURCE_PLACEHOLDER, source)


def _template_for(script_input: ScriptInput) -> str:
    if isinstance(script_input, FileInput):
        return FILE_TEMPLATE
    if isinstance(script_input, ExprInput):
        return EXPR_TEMPLATE
    if isinstance(script_input, LoopInput):
        return LOOP_COUNT_TEMPLATE if script_input.count else LOOP_TEMPLATE
    raise TypeError(f"Unsupported input type: {type(script_input).__name__}")


def _is_divider(line: str) -> bool:
    dashes = 0
    for char in line:
        if char == DIVIDER_CHAR:
            dashes += 1
        elif not char.isspace():
            return False
    return dashes >= DIVIDER_MIN_DASHES


def _source_marker(line: str) -> str | None:
    trimmed = line.lstrip()
    for marker in SOURCE_MARKERS:
        if trimmed.startswith(marker):
            return marker
    return None


def _lines_with_endings(content: str) -> list[str]:
    """Split on ``\\n`` only, keeping line endings so offsets stay exact."""
    lines: list[str] = []
    start = 0
    while start < len(content):
        end = content.find("\n", start)
        end = len(content) if end == -1 else end + 1
        lines.append(content[start:end])
        start = end
    return lines
