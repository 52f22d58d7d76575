from __future__ import annotations

from .config import Config
from .decoder import XmlToArray, xml_to_array
from .document import create_document, parse_string, save_xml
from .encoder import ArrayToXml, array_to_xml
from .exceptions import (
    ConversionError,
    IllegalTagNameError,
    ParseError,
    RootCardinalityError,
)
from .structures import XmlNode
from .utils import is_valid_tag_name

__version__ = "1.0.0"

__all__ = [
    "Config",
    "ArrayToXml",
    "XmlToArray",
    "array_to_xml",
    "xml_to_array",
    "XmlNode",
    "is_valid_tag_name",
    "create_document",
    "parse_string",
    "save_xml",
    "ConversionError",
    "IllegalTagNameError",
    "RootCardinalityError",
    "ParseError",
]
