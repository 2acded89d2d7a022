"""JSON Schema validation for motion spec documents.

This module loads the formal JSON Schema and validates documents the way a
downstream consumer would: schema violations are errors, everything the
schema leaves optional but consumers rely on is reported as a warning.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import Document

# Path to the schema file (shipped next to this module)
SCHEMA_PATH = Path(__file__).parent / "motion_spec.schema.json"

# Layer fields whose absence degrades playback fidelity
RECOMMENDED_LAYER_FIELDS = ("inPoint", "outPoint", "transform", "animationSummary")


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_document(document: Document) -> None:
    """Validate a document against the JSON Schema.

    Args:
        document: The document dictionary to validate

    Raises:
        ValidationError: If the document doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=document, schema=schema)


def validate_document_with_error_details(document: Document) -> tuple[bool, str | None]:
    """Validate a document and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        document: The document dictionary to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_document(document)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        error_msg = f"Validation error at {error_path}: {e.message}"

        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"

        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"


def collect_warnings(document: Document) -> list[str]:
    """List advisory issues that do not make a document invalid.

    Args:
        document: The document dictionary to inspect

    Returns:
        Human-readable warnings, empty when nothing is worth reporting
    """
    warnings: list[str] = []

    if not document.get("exportInfo"):
        warnings.append("Missing exportInfo")

    composition = document.get("composition") or {}
    layers = composition.get("layers") or []
    if not layers:
        warnings.append("Composition has no layers")

    for position, layer in enumerate(layers):
        label = f"Layer {layer.get('index', position + 1)} ({layer.get('name')})"
        for field in RECOMMENDED_LAYER_FIELDS:
            if layer.get(field) is None:
                warnings.append(f"{label}: missing {field}")

    return warnings
