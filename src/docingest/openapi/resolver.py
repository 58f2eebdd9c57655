"""Resolve ``$ref`` JSON Reference pointers in OpenAPI/Swagger documents.

Two flavours of lookup live here:

* :func:`resolve_refs` -- a recursive deep-copy traversal that inlines every
  internal ``$ref``. Used once per document when loading, so extracted
  endpoints carry concrete schemas instead of pointers. An unresolvable or
  external reference raises :class:`~docingest.exceptions.SpecValidationError`.
  Circular references are detected via a ``seen`` set and left unresolved at
  the cycle point.
* :func:`get_schema` -- a single, lenient lookup of one ``#/a/b/c`` pointer.
  It never raises and never follows a ``$ref`` found in its result.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from docingest.exceptions import SpecValidationError

logger = logging.getLogger(__name__)


def resolve_refs(spec: dict[str, Any]) -> dict[str, Any]:
    """Resolve all internal ``$ref`` pointers in the spec.

    Args:
        spec: The raw spec dictionary.

    Returns:
        A **new** dictionary (deep copy) with all resolvable ``$ref``
        pointers replaced by their target objects.

    Raises:
        SpecValidationError: If a ``$ref`` points to a non-existent path
            within the spec, or if an external reference is encountered.
    """
    root = copy.deepcopy(spec)
    return _deep_resolve(root, root, seen=None)


def get_schema(spec: dict[str, Any], ref: str) -> Optional[Any]:
    """Look up the object a local ``#/...`` reference points to.

    Args:
        spec: The spec dictionary to resolve against.
        ref: A reference such as ``"#/components/schemas/User"``.

    Returns:
        The referenced object, returned as-is (a ``$ref`` inside it is not
        followed). ``None`` when *ref* does not start with ``#/``, when a
        segment is missing, or when the lookup fails.
    """
    if not isinstance(ref, str) or not ref.startswith("#/"):
        return None

    try:
        current: Any = spec
        for segment in _pointer_segments(ref):
            current = _step(current, segment)
            if current is None:
                return None
        return current
    except (KeyError, IndexError, TypeError, ValueError):
        logger.error("Error getting schema: %s", ref, exc_info=True)
        return None


def _pointer_segments(ref: str) -> list[str]:
    """Split ``#/a/b`` into unescaped segments (RFC 6901 ``~1`` / ``~0``)."""
    return [
        segment.replace("~1", "/").replace("~0", "~")
        for segment in ref[2:].split("/")
    ]


def _step(current: Any, segment: str) -> Any:
    """Descend one pointer segment; ``None`` when the segment is absent."""
    if isinstance(current, dict):
        return current.get(segment)
    if isinstance(current, list):
        index = int(segment)
        return current[index] if 0 <= index < len(current) else None
    return None


def _resolve_ref(ref: str, root: dict[str, Any]) -> Any:
    """Resolve a single ``$ref`` string against the root spec.

    Raises:
        SpecValidationError: If the reference is external or any segment
            does not exist in the document.
    """
    if not isinstance(ref, str) or not ref.startswith("#/"):
        raise SpecValidationError(
            f"External $ref not supported: {ref}. "
            "Only internal references (#/...) are handled."
        )

    current: Any = root
    for segment in _pointer_segments(ref):
        if isinstance(current, dict):
            if segment not in current:
                raise SpecValidationError(
                    f"Cannot resolve $ref '{ref}': key '{segment}' not found at path"
                )
            current = current[segment]
        elif isinstance(current, list):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError) as exc:
                raise SpecValidationError(
                    f"Cannot resolve $ref '{ref}': invalid array index '{segment}'"
                ) from exc
        else:
            raise SpecValidationError(
                f"Cannot resolve $ref '{ref}': "
                f"cannot navigate into {type(current).__name__}"
            )

    return current


def _deep_resolve(obj: Any, root: dict[str, Any], seen: set[str] | None = None) -> Any:
    """Recursively resolve all ``$ref`` pointers within *obj*.

    ``seen`` holds the refs currently on the resolution stack; a copy is made
    per branch so sibling references do not interfere with each other.
    """
    if seen is None:
        seen = set()

    if isinstance(obj, dict):
        if "$ref" in obj:
            ref = obj["$ref"]
            resolved = _resolve_ref(ref, root)
            if ref in seen:
                return obj
            return _deep_resolve(resolved, root, seen | {ref})

        return {key: _deep_resolve(value, root, seen) for key, value in obj.items()}

    if isinstance(obj, list):
        return [_deep_resolve(item, root, seen) for item in obj]

    return obj
