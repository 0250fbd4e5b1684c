"""Constants used by the package cache and identity hashing."""

from __future__ import annotations

CACHE_DIRNAME: str = "script-cache"
CACHE_VENDOR_DIRNAME: str = "Cargo"
CARGO_HOME_DIRNAME: str = ".cargo"

METADATA_FILENAME: str = "metadata.json"
METADATA_TEMP_PREFIX: str = ".metadata-"
METADATA_TEMP_SUFFIX: str = ".tmp"

MANIFEST_FILENAME: str = "Cargo.toml"
SOURCE_EXTENSION: str = ".rs"
TARGET_DIRNAME: str = "target"
PROFILE_DEBUG: str = "debug"
PROFILE_RELEASE: str = "release"

# Long enough that collisions between one user's scripts are irrelevant.
ID_DIGEST_LEN_MAX: int = 24
STUB_DIGEST: str = "stub"

ID_PREFIX_FILE: str = "file-"
ID_PREFIX_EXPR: str = "expr-"
ID_PREFIX_LOOP: str = "loop-"

MILLIS_PER_DAY: int = 24 * 60 * 60 * 1000
DEFAULT_MAX_CACHE_AGE_DAYS: int = 7

PACKAGE_TEMP_PREFIX: str = ".package-"
PACKAGE_TEMP_SUFFIX: str = ".tmp"
# Filesystems with whole-second timestamps cannot order anything finer.
SOURCE_MTIME_LEAD_NS: int = 1_000_000_000
