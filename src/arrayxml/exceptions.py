from __future__ import annotations

from typing import Any, Optional


class ConversionError(ValueError):
    """Base error for array/XML conversion."""


class IllegalTagNameError(ConversionError):
    """Raised when an element or attribute name is not a valid XML name."""

    def __init__(self, tag: Any, node: Optional[str] = None, kind: str = "tag") -> None:
        self.tag = tag
        self.node = node
        self.kind = kind
        message = f"Illegal character in {kind} name. {kind}: {tag}"
        if node is not None:
            message = f"{message} in node: {node}"
        super().__init__(message)


class RootCardinalityError(ConversionError):
    """Raised when the input does not have exactly one root element."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Xml needs to have one root element, got {count}")


class ParseError(ConversionError):
    """Raised when XML text is not well-formed.

    The message is the first diagnostic reported by the parser.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.line = line
        self.column = column
        super().__init__(message)


__all__ = [
    "ConversionError",
    "IllegalTagNameError",
    "RootCardinalityError",
    "ParseError",
]
