from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union
from xml.dom import minidom

from .config import Config
from .document import create_document, save_xml
from .exceptions import IllegalTagNameError, RootCardinalityError
from .structures import XmlNode
from .utils import is_positional, is_valid_tag_name, positional_items, to_text

logger = logging.getLogger(__name__)

CDATA_END = "]]>"


def _check_name(name: Any, node: Optional[str], kind: str = "tag") -> str:
    if not is_valid_tag_name(name):
        raise IllegalTagNameError(name, node, kind)
    return str(name)


def _cdata_sections(text: str) -> List[str]:
    """Split text so no section contains the ``]]>`` terminator."""

    parts = text.split(CDATA_END)
    last = len(parts) - 1
    return [
        (">" if index else "") + part + ("]]" if index < last else "")
        for index, part in enumerate(parts)
    ]


class ArrayToXml:
    """Builds an XML document from the array model."""

    def __init__(self, config: Union[Config, Mapping[str, Any], None] = None) -> None:
        self.config = Config.coerce(config)

    def build_tree(self, data: Mapping[Any, Any]) -> XmlNode:
        """Validate data and normalize it into an XmlNode tree.

        The caller's mapping is never modified.
        """

        if not isinstance(data, Mapping):
            raise TypeError("data must be a mapping")
        if len(data) != 1:
            raise RootCardinalityError(len(data))
        ((tag, value),) = data.items()
        return self._node(_check_name(tag, None), value)

    def _node(self, tag: str, value: Any) -> XmlNode:
        if isinstance(value, (list, tuple)):
            # A list is only meaningful as the value of a mapping entry.
            value = dict(enumerate(value))
        if not isinstance(value, Mapping):
            return XmlNode(tag, text=to_text(value))

        config = self.config
        consumed = set()

        attributes: Tuple[Tuple[str, str], ...] = ()
        raw_attributes = value.get(config.attributes_key)
        if isinstance(raw_attributes, Mapping):
            attributes = tuple(
                (_check_name(name, tag, "attribute"), to_text(attr_value))
                for name, attr_value in raw_attributes.items()
            )
            consumed.add(config.attributes_key)

        text = None
        if config.value_key in value:
            text = to_text(value[config.value_key])
            consumed.add(config.value_key)

        cdata = None
        if config.cdata_key in value:
            cdata = to_text(value[config.cdata_key])
            consumed.add(config.cdata_key)

        children: List[XmlNode] = []
        for key, child in value.items():
            if key in consumed:
                continue
            name = _check_name(key, tag)
            if is_positional(child):
                children.extend(self._node(name, item) for item in positional_items(child))
            else:
                children.append(self._node(name, child))

        return XmlNode(tag, attributes=attributes, text=text, cdata=cdata, children=tuple(children))

    def render(self, node: XmlNode, document: minidom.Document) -> minidom.Element:
        """Create the DOM element for node and its subtree."""

        element = document.createElement(node.tag)
        for name, value in node.attributes:
            element.setAttribute(name, value)
        if node.text is not None:
            element.appendChild(document.createTextNode(node.text))
        if node.cdata is not None:
            for section in _cdata_sections(node.cdata):
                element.appendChild(document.createCDATASection(section))
        for child in node.children:
            element.appendChild(self.render(child, document))
        return element

    def build_xml(self, data: Mapping[Any, Any]) -> minidom.Document:
        """Convert data into a new DOM document."""

        tree = self.build_tree(data)
        logger.debug("Building XML document with root element %r", tree.tag)
        document = create_document(self.config.version, self.config.encoding)
        document.appendChild(self.render(tree, document))
        return document

    def build_string(self, data: Mapping[Any, Any]) -> str:
        return save_xml(self.build_xml(data), self.config.format_output)


def array_to_xml(
    data: Mapping[Any, Any],
    config: Union[Config, Mapping[str, Any], None] = None,
    **options: Any,
) -> str:
    """Serialize data to XML text in one call.

    Keyword options override the values taken from config.
    """

    return ArrayToXml(Config.coerce(config).merged(options)).build_string(data)


__all__ = ["ArrayToXml", "array_to_xml"]
