"""Tests for the file set helpers (text_file, json_file, js_literal)."""

from __future__ import annotations

import json

import pytest

from pilet_generators.synthesizer import js_literal, json_file, text_file

pytestmark = pytest.mark.unit


class TestTextFile:
    def test_utf8(self):
        assert text_file("Grüß") == "Grüß".encode("utf-8")

    def test_empty(self):
        assert text_file("") == b""


class TestJsonFile:
    def test_two_space_indent_no_trailing_newline(self):
        assert json_file({"a": [1, 2], "b": {}}) == b'{\n  "a": [\n    1,\n    2\n  ],\n  "b": {}\n}'

    def test_key_order_preserved(self):
        content = json_file({"zeta": 1, "alpha": 2})
        assert list(json.loads(content)) == ["zeta", "alpha"]

    def test_non_ascii_kept(self):
        assert "é".encode("utf-8") in json_file({"name": "café"})

    def test_empty_containers(self):
        assert json_file({"dependencies": {}, "files": []}) == b'{\n  "dependencies": {},\n  "files": []\n}'


class TestJsLiteral:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("@org/app", '"@org/app"'),
            (2, "2"),
            (2.0, "2"),
            (2.5, "2.5"),
            (True, "true"),
            (False, "false"),
            (["orange", "apple"], '["orange","apple"]'),
            ([], "[]"),
            ('say "hi"', '"say \\"hi\\""'),
        ],
    )
    def test_literals(self, value, expected):
        assert js_literal(value) == expected
