# topmark:header:start
#
#   project      : shdoc
#   file         : test_json_render.py
#   file_relpath : tests/rendering/test_json_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON renderer and format dispatch."""

from __future__ import annotations

import json

from shdoc.parser import parse_text
from shdoc.rendering import DocumentFormat, render_document, render_json
from tests.conftest import mark_rendering


@mark_rendering
def test_json_matches_model_dict() -> None:
    result = parse_text("# @description d\n# @env HOME\nf() {\n", advisory_sink=lambda d: None)
    assert result.model is not None

    text = render_json(result.model)
    assert text.endswith("}\n")
    data = json.loads(text)
    assert data == result.model.to_dict()
    assert data["entries"][0]["name"] == "f"
    assert data["variables_read"] == {"HOME": ["f"]}


@mark_rendering
def test_render_document_dispatch() -> None:
    result = parse_text("# @section Top\n", advisory_sink=lambda d: None)
    assert result.model is not None
    assert render_document(result.model).startswith("## Index\n")
    assert json.loads(render_document(result.model, DocumentFormat.JSON))["entries"][0] == {
        "kind": "section",
        "title": "Top",
        "description": "",
        "file": "<input>",
        "line": 1,
    }
