"""Constants for splitting embedded manifests from script source."""

from __future__ import annotations

import re

SHEBANG_PREFIX: str = "#!"
INNER_ATTRIBUTE_PREFIX: str = "#!["

DIVIDER_CHAR: str = "-"
DIVIDER_MIN_DASHES: int = 3

# Left-trimmed lines starting with any of these begin the Rust source.
SOURCE_MARKERS: tuple[str, ...] = (
    "//",
    "/*",
    "#![",
    "#[",
    "pub ",
    "extern ",
    "use ",
    "mod ",
    "type ",
    "struct ",
    "enum ",
    "fn ",
    "impl ",
    "impl<",
    "static ",
    "const ",
)

DEFAULT_DEPENDENCY_VERSION: str = "*"
DEPENDENCY_SEPARATOR: str = "="
INLINE_TABLE_PREFIX: str = "{"
DEPENDENCIES_TABLE: str = "dependencies"

CRATE_NAME_PATTERN_TEMPLATE: str = r"--crate-name {name}\s(.*)`"
EXTERN_PATTERN: re.Pattern[str] = re.compile(r"--extern (.+?)=")
