from __future__ import annotations

from typing import Any, Dict

import pytest

SAMPLES: Dict[str, Dict[str, Any]] = {
    "flat": {
        "note": {"to": "Tove", "from": "Jani", "heading": "Reminder", "body": "Body node"},
    },
    "repeated": {
        "note": {"to": [{"name": "n1", "file": "q"}, {"name": "n2", "file": "f"}]},
    },
    "attributes": {
        "table": {
            "name": {"@value": "African Coffee Table", "@attributes": {"id": "1", "attrib": "test"}},
            "width": {"@value": "80", "@attributes": {"id": "2"}},
        },
    },
    "cdata": {
        "note": {"heading": "Reminder", "body": {"@cdata": "I can use <, & and -- freely"}},
    },
    "cdata_terminator": {
        "note": {"body": {"@cdata": "if (a[b[0]]>1) {}"}, "tail": {"@cdata": "]]>"}},
    },
    "empty": {
        "table": {"name": "", "width": "80"},
    },
    "non_ascii": {
        "menu": {"dish": {"@value": "café crème", "@attributes": {"price": "5€"}}, "note": "naïve ½"},
    },
    "nested": {
        "library": {
            "@attributes": {"city": "Oslo"},
            "shelf": [
                {"book": [{"title": "A"}, {"title": "B"}], "@attributes": {"n": "1"}},
                {"book": {"title": "C"}, "@attributes": {"n": "2"}},
            ],
        },
    },
}


@pytest.fixture(params=sorted(SAMPLES), ids=sorted(SAMPLES))
def sample(request: pytest.FixtureRequest) -> Dict[str, Any]:
    return SAMPLES[request.param]


@pytest.fixture(params=["text", "document"], ids=["text", "document"])
def via(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture(params=["UTF-8", "ISO-8859-1", "US-ASCII"], ids=["utf8", "latin1", "ascii"])
def encoding(request: pytest.FixtureRequest) -> str:
    return request.param
