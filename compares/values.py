"""
Equality rules for decoded document values.

Decoded values are plain Python objects (dict, list, str, int, float,
bool, None, plus the extra scalars PyYAML's safe loader produces).
Python's own ``==`` is too loose for a diff: ``True == 1`` and
``1 == 1.0`` both hold. Each encoding therefore gets one explicit rule:

    JSON  - every number is the same kind of number, so 1 and 1.0 match.
    YAML  - integers and floats are different scalar types, so they don't.

In both encodings a bool is never equal to a number.
"""
import math
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _scalars_equal(old_value: Any, new_value: Any, strict_numbers: bool) -> bool:
    # Numbers first, since bool is a subclass of int
    if _is_number(old_value) and _is_number(new_value):
        if strict_numbers and type(old_value) != type(new_value):
            return False
        if isinstance(old_value, float) and isinstance(new_value, float):
            # .nan is one value in a document, so it matches itself
            if math.isnan(old_value) and math.isnan(new_value):
                return True
        return old_value == new_value

    if type(old_value) != type(new_value):
        return False
    return old_value == new_value


def values_equal(old_value: Any, new_value: Any, strict_numbers: bool = False) -> bool:
    """
    Compare two decoded values.

    Nested lists and dicts are walked with an explicit stack, so nesting
    depth is limited only by what the decoder accepts.

    Args:
        old_value: Value from the x document
        new_value: Value from the y document
        strict_numbers: If True, int and float never compare equal

    Returns:
        True if the values are equal under the encoding's rule
    """
    pending = [(old_value, new_value)]
    # Container pairs already walked; YAML anchors can make a value contain itself
    seen = set()
    while pending:
        old_item, new_item = pending.pop()

        if isinstance(old_item, (list, dict)):
            pair = (id(old_item), id(new_item))
            if pair in seen:
                continue
            seen.add(pair)

        if isinstance(old_item, list) and isinstance(new_item, list):
            if len(old_item) != len(new_item):
                return False
            pending.extend(zip(old_item, new_item))
        elif isinstance(old_item, dict) and isinstance(new_item, dict):
            if old_item.keys() != new_item.keys():
                return False
            pending.extend((old_item[key], new_item[key]) for key in old_item)
        elif not _scalars_equal(old_item, new_item, strict_numbers):
            return False

    return True


def json_values_equal(old_value: Any, new_value: Any) -> bool:
    return values_equal(old_value, new_value, strict_numbers=False)


def yaml_values_equal(old_value: Any, new_value: Any) -> bool:
    return values_equal(old_value, new_value, strict_numbers=True)
