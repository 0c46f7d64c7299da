# Compares v1.0.0
"""
Compares package.
Contains the JSON/YAML comparers, decoders and report rendering.
"""
from compares.comparison import (
    Comparer,
    JsonComparer,
    YamlComparer,
    ComparisonResult,
    diff_mappings,
    get_comparer
)
from compares.decoders import (
    decode_json,
    decode_yaml,
    detect_encoding,
    is_valid_json,
    normalize_encoding,
    read_document
)
from compares.errors import (
    CompareError,
    NoItemError,
    OnlyOneItemError,
    NilInputError,
    InvalidDocumentError,
    DecodeError,
    UnsupportedEncodingError
)
from compares.report import generate_report
from compares.values import values_equal

__all__ = [
    "Comparer",
    "JsonComparer",
    "YamlComparer",
    "ComparisonResult",
    "diff_mappings",
    "get_comparer",
    "decode_json",
    "decode_yaml",
    "detect_encoding",
    "is_valid_json",
    "normalize_encoding",
    "read_document",
    "CompareError",
    "NoItemError",
    "OnlyOneItemError",
    "NilInputError",
    "InvalidDocumentError",
    "DecodeError",
    "UnsupportedEncodingError",
    "generate_report",
    "values_equal"
]
