"""
Document Comparison Engine

Compares serialized JSON or YAML documents handed over as raw bytes.
Three questions are answered:

- are_equal: are N buffers equal, checked pairwise along the chain
- is_equal:  are two buffers byte-identical
- compare:   which top-level keys were added, removed or changed

Only the top level of a document is diffed. A change anywhere inside a
shared key's value is reported as that key having changed.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from compares.decoders import JSON, YAML, decode_json, decode_yaml, is_valid_json, normalize_encoding
from compares.errors import InvalidDocumentError, NilInputError, NoItemError, OnlyOneItemError
from compares.values import json_values_equal, yaml_values_equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing two documents.

    Key order follows mapping iteration and carries no meaning.
    """
    equal: bool = True
    new_keys: tuple = ()
    deleted_keys: tuple = ()
    changed_keys: tuple = ()

    @property
    def change_count(self) -> int:
        return len(self.new_keys) + len(self.deleted_keys) + len(self.changed_keys)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "equal": self.equal,
            "change_count": self.change_count,
            "new_keys": list(self.new_keys),
            "deleted_keys": list(self.deleted_keys),
            "changed_keys": list(self.changed_keys)
        }


def _as_buffer(item: Any) -> Optional[bytes]:
    """Normalize bytes-like input to bytes, keeping None as None."""
    if item is None or isinstance(item, bytes):
        return item
    if isinstance(item, (bytearray, memoryview)):
        return bytes(item)
    raise TypeError(f"expected a bytes-like buffer, got {type(item).__name__}")


def diff_mappings(
    x_map: dict,
    y_map: dict,
    values_equal: Callable[[Any, Any], bool]
) -> ComparisonResult:
    """
    Reconcile the top-level key sets of two decoded documents.

    Args:
        x_map: The baseline document
        y_map: The document compared against the baseline
        values_equal: Equality rule for values under a shared key

    Returns:
        ComparisonResult with new keys (only in y), deleted keys
        (only in x) and changed keys (in both, values differ)
    """
    new_keys = []
    deleted_keys = []
    changed_keys = []

    for key, value in x_map.items():
        if key not in y_map:
            deleted_keys.append(key)
        elif not values_equal(value, y_map[key]):
            changed_keys.append(key)

    for key in y_map:
        if key not in x_map:
            new_keys.append(key)

    return ComparisonResult(
        equal=not (new_keys or deleted_keys or changed_keys),
        new_keys=tuple(new_keys),
        deleted_keys=tuple(deleted_keys),
        changed_keys=tuple(changed_keys)
    )


class Comparer(ABC):
    """
    Stateless comparer for one document encoding.

    Subclasses only supply the decode step and the value equality rule.
    Instances hold no state and can be shared freely.
    """

    encoding: str = ""

    def are_equal(self, *items) -> tuple[bool, int]:
        """
        Check whether all items are equal, each against the one before it.

        Items are compared as raw bytes, never decoded. Comparison stops
        at the first pair that differs.

        Returns:
            (True, 0) if every adjacent pair is equal. Otherwise
            (equal_so_far, index) where index is the position of the first
            item that differs from its predecessor and equal_so_far is
            True only if some earlier pair matched.

        Raises:
            NoItemError: If no items are given
            OnlyOneItemError: If a single item is given
        """
        if len(items) == 0:
            raise NoItemError()
        if len(items) == 1:
            raise OnlyOneItemError()

        equal = False
        previous = _as_buffer(items[0])
        for index in range(1, len(items)):
            current = _as_buffer(items[index])
            if previous != current:
                return equal, index
            equal = True
            previous = current
        return equal, 0

    def is_equal(self, x, y) -> bool:
        """
        Check whether x and y are byte-identical.

        Raises:
            NilInputError: If x or y is None
        """
        if x is None:
            raise NilInputError("x")
        if y is None:
            raise NilInputError("y")
        x = _as_buffer(x)
        y = _as_buffer(y)
        return x == y

    def compare(self, x, y) -> ComparisonResult:
        """
        Compare y against x at the top level.

        New keys are in y but not x, deleted keys are in x but not y,
        changed keys are in both with different values.

        Raises:
            NilInputError: If x or y is None
            InvalidDocumentError: If a side fails pre-decode validation
            DecodeError: If the decoder rejects a side
        """
        if x is None:
            raise NilInputError("x")
        if y is None:
            raise NilInputError("y")
        x = _as_buffer(x)
        y = _as_buffer(y)

        self.validate(x, "x")
        self.validate(y, "y")

        x_map = self.decode(x, "x")
        y_map = self.decode(y, "y")

        result = diff_mappings(x_map, y_map, self.values_equal)
        logger.debug(
            f"Compared {self.encoding} documents: {len(result.new_keys)} new, "
            f"{len(result.deleted_keys)} deleted, {len(result.changed_keys)} changed"
        )
        return result

    def validate(self, buffer: bytes, side: str) -> None:
        """Check a buffer before decoding. No check by default."""

    @abstractmethod
    def decode(self, buffer: bytes, side: str) -> dict:
        """Decode a buffer into its top-level mapping."""

    @abstractmethod
    def values_equal(self, old_value: Any, new_value: Any) -> bool:
        """Equality rule for values under a shared key."""


class JsonComparer(Comparer):
    """Comparer for JSON documents. Both sides are validated before decoding."""

    encoding = JSON

    def validate(self, buffer: bytes, side: str) -> None:
        if not is_valid_json(buffer):
            raise InvalidDocumentError(side, JSON)

    def decode(self, buffer: bytes, side: str) -> dict:
        return decode_json(buffer, side)

    def values_equal(self, old_value: Any, new_value: Any) -> bool:
        return json_values_equal(old_value, new_value)


class YamlComparer(Comparer):
    """
    Comparer for YAML documents.

    There is no validation step: malformed input surfaces as the
    DecodeError raised while decoding.
    """

    encoding = YAML

    def decode(self, buffer: bytes, side: str) -> dict:
        return decode_yaml(buffer, side)

    def values_equal(self, old_value: Any, new_value: Any) -> bool:
        return yaml_values_equal(old_value, new_value)


_COMPARERS = {
    JSON: JsonComparer,
    YAML: YamlComparer,
}


def get_comparer(encoding: str) -> Comparer:
    """
    Get a comparer for an encoding name ("json", "yaml" or "yml").

    Raises:
        UnsupportedEncodingError: For any other name
    """
    return _COMPARERS[normalize_encoding(encoding)]()
