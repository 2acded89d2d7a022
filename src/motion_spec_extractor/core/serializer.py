"""JSON serialization of motion spec documents."""

import json
import math
import re
from typing import Any

CIRCULAR_MARKER = "[Circular]"
OUTPUT_SUFFIX = "_motion-spec.json"

# Characters kept in output file names
UNSAFE_NAME_CHARS = r"[^a-zA-Z0-9_-]"


def sanitize_for_json(value: Any, _ancestors: set[int] | None = None) -> Any:
    """Make a value tree safe for strict JSON.

    Non-finite floats become None, tuples become lists and a container that
    contains itself is replaced by ``"[Circular]"``. Shared (non-circular)
    references are copied normally.

    Args:
        value: Document or any part of it

    Returns:
        A new tree built from dicts, lists, strings, numbers, bools and None
    """
    if _ancestors is None:
        _ancestors = set()

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if isinstance(value, (dict, list, tuple)):
        marker = id(value)
        if marker in _ancestors:
            return CIRCULAR_MARKER
        _ancestors.add(marker)
        try:
            if isinstance(value, dict):
                return {str(k): sanitize_for_json(v, _ancestors) for k, v in value.items()}
            return [sanitize_for_json(item, _ancestors) for item in value]
        finally:
            _ancestors.discard(marker)

    return value


def to_json(document: Any, pretty: bool = True) -> str:
    """Serialize a document to a JSON string.

    Args:
        document: Document to serialize
        pretty: Indent with two spaces; compact separators otherwise

    Returns:
        JSON text without NaN/Infinity literals
    """
    clean = sanitize_for_json(document)
    if pretty:
        return json.dumps(clean, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(clean, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def default_output_name(composition_name: str | None) -> str:
    """Build the default output file name for a composition.

    Example:
        "Hero Intro (v2)" -> "Hero_Intro__v2__motion-spec.json"
    """
    base = re.sub(UNSAFE_NAME_CHARS, "_", composition_name or "composition")
    return f"{base}{OUTPUT_SUFFIX}"
