"""
Error taxonomy for the comparison engine.

Every error is raised straight to the caller; nothing here is retried,
logged or recovered from inside the engine.
"""
from typing import Optional


class CompareError(ValueError):
    """Base class for all comparison failures."""


class NoItemError(CompareError):
    def __init__(self):
        super().__init__("there is no item to compare")


class OnlyOneItemError(CompareError):
    def __init__(self):
        super().__init__("there is only one item to compare")


class NilInputError(CompareError):
    """A required buffer argument was None."""

    def __init__(self, side: str):
        self.side = side
        super().__init__(f"{side} is nil item")


class InvalidDocumentError(CompareError):
    """A buffer failed the well-formedness check that runs before decoding."""

    def __init__(self, side: str, encoding: str = "json"):
        self.side = side
        self.encoding = encoding
        super().__init__(f"{side} is invalid {encoding}")


class DecodeError(CompareError):
    """
    The decoder rejected a buffer.

    The message is the decoder's own message, unmodified. The original
    exception is available as ``__cause__``.
    """

    def __init__(self, message: str, side: Optional[str] = None, encoding: Optional[str] = None):
        self.side = side
        self.encoding = encoding
        super().__init__(message)


class UnsupportedEncodingError(CompareError):
    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"unsupported encoding: {encoding}")
