"""Content-addressed identifiers for cache slots."""

from __future__ import annotations

import hashlib
import logging

from cargo_script.constants.cache import (
    ID_DIGEST_LEN_MAX,
    ID_PREFIX_EXPR,
    ID_PREFIX_FILE,
    ID_PREFIX_LOOP,
    STUB_DIGEST,
)
from cargo_script.model import ExprInput, FileInput, LoopInput, ScriptInput
from cargo_script.types import DependencyList

logger = logging.getLogger(__name__)


class IdentityHasher:
    """Compute the cache slot name for an input and its dependencies.

    File inputs are identified by path alone; edits to the file are caught by
    the modification time stored in the slot's metadata. Expressions and loop
    closures have no path, so their content and dependencies are hashed.

    With ``stub_hashes`` set, every digest is replaced by ``"stub"`` so that
    slot names are predictable in tests.
    """

    def __init__(self, *, stub_hashes: bool = False) -> None:
        self.stub_hashes = stub_hashes

    def compute_id(self, script_input: ScriptInput, deps: DependencyList) -> str:
        """Return the slot identifier for ``script_input``."""
        if isinstance(script_input, FileInput):
            blob = str(script_input.path).encode("utf-8")
            slot_id = f"{ID_PREFIX_FILE}{script_input.name}-{self._digest(blob)}"
        elif isinstance(script_input, ExprInput):
            blob = self._deps_blob(deps) + script_input.content.encode("utf-8")
            slot_id = f"{ID_PREFIX_EXPR}{self._digest(blob)}"
        elif isinstance(script_input, LoopInput):
            # The count flag changes the generated source, so it is part of the identity.
            count = b"count:true;" if script_input.count else b"count:false;"
            blob = self._deps_blob(deps) + count + script_input.content.encode("utf-8")
            slot_id = f"{ID_PREFIX_LOOP}{self._digest(blob)}"
        else:
            raise TypeError(f"Unsupported input type: {type(script_input).__name__}")

        logger.debug("id: %s", slot_id)
        return slot_id

    def _digest(self, blob: bytes) -> str:
        if self.stub_hashes:
            return STUB_DIGEST
        return hashlib.sha1(blob).hexdigest()[:ID_DIGEST_LEN_MAX]

    @staticmethod
    def _deps_blob(deps: DependencyList) -> bytes:
        return "".join(f"dep={name}={version};" for name, version in sorted(deps)).encode("utf-8")
