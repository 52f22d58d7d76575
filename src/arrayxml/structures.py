from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class XmlNode:
    """Element description built from the array model before rendering.

    ``text`` and ``cdata`` are ``None`` when the element has no such child.
    Rendering order is attributes, text, cdata, then children.
    """

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    text: Optional[str] = None
    cdata: Optional[str] = None
    children: Tuple["XmlNode", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str):
            raise TypeError("tag must be str")
        if self.text is not None and not isinstance(self.text, str):
            raise TypeError("text must be str or None")
        if self.cdata is not None and not isinstance(self.cdata, str):
            raise TypeError("cdata must be str or None")


__all__ = ["XmlNode"]
