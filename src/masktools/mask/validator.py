"""Well-formedness checks for masks and class specs.

Masks loaded from files are untrusted: a literal ``?`` that does not start a
recognised token makes the whole line invalid.  Callers skip such lines and
keep going rather than aborting the run.
"""

from __future__ import annotations

from ..utils.constants import BYTE_FLAG, CLASS_FLAGS, SENTINEL
from ..utils.errors import ClassSpecError

__all__ = ["is_valid_mask", "validate_class_spec"]


def is_valid_mask(mask: str, *, allow_bytes: bool = False) -> bool:
    """Return ``True`` if every ``?`` in ``mask`` begins a class token.

    With ``allow_bytes`` the ``?b`` token emitted by the multi-byte pass is
    accepted as well.
    """

    flags = CLASS_FLAGS + BYTE_FLAG if allow_bytes else CLASS_FLAGS
    i = 0
    while i < len(mask):
        if mask[i] == SENTINEL:
            if i + 1 < len(mask) and mask[i + 1] in flags:
                i += 2
                continue
            return False
        i += 1
    return True


def validate_class_spec(class_spec: str, *, allowed: str = CLASS_FLAGS) -> str:
    """Return ``class_spec`` unchanged or raise :class:`ClassSpecError`."""

    if not class_spec:
        raise ClassSpecError("class spec must not be empty")
    unknown = sorted({ch for ch in class_spec if ch not in allowed})
    if unknown:
        joined = ", ".join(repr(ch) for ch in unknown)
        raise ClassSpecError(f"class spec may only contain {', '.join(allowed)}; got {joined}")
    return class_spec
