"""
Decoding utilities for the comparison engine.

Turns raw document buffers into top-level mappings. JSON is decoded with
the standard library, YAML with PyYAML's safe loader.
"""
import json
from pathlib import Path
from typing import Any, Optional

import yaml

from compares.errors import DecodeError, UnsupportedEncodingError


JSON = "json"
YAML = "yaml"

# File extensions (lower case) mapped to encodings
EXTENSIONS = {
    ".json": JSON,
    ".yaml": YAML,
    ".yml": YAML,
}

# Accepted spellings for an encoding name
ENCODING_ALIASES = {
    "json": JSON,
    "yaml": YAML,
    "yml": YAML,
}


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not part of JSON
    raise ValueError(f"invalid JSON constant: {name}")


def _type_name(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def normalize_encoding(encoding: str) -> str:
    """Resolve an encoding name such as "JSON" or "yml" to json/yaml."""
    resolved = ENCODING_ALIASES.get(str(encoding).strip().lower())
    if resolved is None:
        raise UnsupportedEncodingError(encoding)
    return resolved


def is_valid_json(buffer: bytes) -> bool:
    """
    Check that a buffer holds exactly one well-formed JSON value.

    Any JSON value counts, not only objects.
    """
    try:
        json.loads(buffer, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return False
    return True


def decode_json(buffer: bytes, side: Optional[str] = None) -> dict:
    """
    Decode a JSON buffer into its top-level mapping.

    A document of ``null`` decodes to an empty mapping.

    Raises:
        DecodeError: If the buffer is not JSON or its top level is not an object
    """
    try:
        document = json.loads(buffer, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise DecodeError(str(e), side=side, encoding=JSON) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise DecodeError(
            f"cannot decode json {_type_name(document)} into a mapping",
            side=side,
            encoding=JSON
        )
    return document


def _yaml_key(key: Any) -> str:
    """Render a YAML mapping key as the string it is spelled as."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def decode_yaml(buffer: bytes, side: Optional[str] = None) -> dict:
    """
    Decode a YAML buffer into its top-level mapping.

    An empty document decodes to an empty mapping. Top-level keys that
    are not strings (``1:``, ``true:``) are converted to strings. A converted key
    that collides with another (``1:`` and ``'1':``) is an error. Nested
    values are left exactly as PyYAML's safe loader builds them.

    Raises:
        DecodeError: If PyYAML rejects the buffer, its top level is not a
            mapping, or two top-level keys convert to the same string
    """
    try:
        document = yaml.safe_load(buffer)
    except (yaml.YAMLError, RecursionError) as e:
        raise DecodeError(str(e), side=side, encoding=YAML) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise DecodeError(
            f"cannot decode yaml {_type_name(document)} into a mapping",
            side=side,
            encoding=YAML
        )
    mapping = {}
    for key, value in document.items():
        name = _yaml_key(key)
        if name in mapping:
            raise DecodeError(
                f"duplicate yaml key after conversion to string: {name}",
                side=side,
                encoding=YAML
            )
        mapping[name] = value
    return mapping


def detect_encoding(filename: str, default: Optional[str] = None) -> str:
    """
    Work out a document's encoding from its file extension.

    Examples:
        baseline.json -> json
        deploy.YML    -> yaml
        notes.txt     -> default (or UnsupportedEncodingError)
    """
    suffix = Path(filename).suffix.lower()
    if suffix in EXTENSIONS:
        return EXTENSIONS[suffix]
    if default is not None:
        return normalize_encoding(default)
    raise UnsupportedEncodingError(suffix or filename)


def read_document(file_path: str) -> bytes:
    """Read a document from disk as raw bytes."""
    return Path(file_path).read_bytes()
