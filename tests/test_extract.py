"""Tests for structured-output extraction."""

from __future__ import annotations

import json

import pytest

from drawing_analysis_mcp.extract import extract_json
from tests.conftest import model_output


class TestExtractJson:
    def test_plain_json(self):
        result = extract_json('{"a": 1}')
        assert result.success is True
        assert result.data == {"a": 1}

    def test_fenced_with_prose_matches_unwrapped(self):
        payload = model_output()
        bare = extract_json(json.dumps(payload))
        fenced = extract_json(
            "Here is the analysis you asked for:\n```json\n"
            + json.dumps(payload, indent=2)
            + "\n```\nLet me know if you need anything else."
        )
        assert fenced.success and bare.success
        assert fenced.data == bare.data

    def test_unlabeled_fence(self):
        assert extract_json('```\n{"x": [1, 2]}\n```').data == {"x": [1, 2]}

    def test_surrounding_whitespace(self):
        assert extract_json('\n\n   {"x": true}   \n').data == {"x": True}

    def test_object_embedded_in_prose(self):
        result = extract_json('Sure! {"title": "Ev"} Hope this helps.')
        assert result.data == {"title": "Ev"}

    def test_first_valid_block_wins(self):
        text = '```json\n{"first": 1}\n```\nand also\n```json\n{"second": 2}\n```'
        assert extract_json(text).data == {"first": 1}

    def test_broken_block_skipped_for_later_valid_one(self):
        text = '```json\n{"broken": \n```\n```json\n{"ok": true}\n```'
        assert extract_json(text).data == {"ok": True}

    def test_braces_inside_strings(self):
        result = extract_json('prefix {"summary": "a {curly} note"} suffix')
        assert result.data == {"summary": "a {curly} note"}

    def test_top_level_array_is_not_an_object(self):
        result = extract_json('[{"a": 1}]')
        assert result.success is True
        assert result.data == {"a": 1}

    @pytest.mark.parametrize("text", ["This is not valid JSON at all!", "", "   ", None, "{unclosed"])
    def test_failure_is_data_not_exception(self, text):
        result = extract_json(text)
        assert result.success is False
        assert result.data is None
        assert result.error
        assert result.raw_text == (text or "")


class TestNearJsonRepair:
    def test_trailing_commas_removed(self):
        result = extract_json('{"a": 1, "b": [1, 2,],}')
        assert result.success is True
        assert result.data == {"a": 1, "b": [1, 2]}

    def test_unquoted_keys_and_undefined(self):
        result = extract_json("{a: 1, b: undefined}")
        assert result.success is True
        assert result.data == {"a": 1, "b": None}

    def test_single_quotes_without_double_quotes(self):
        assert extract_json("{'title': 'Ev', 'strength': 'weak'}").data == {
            "title": "Ev", "strength": "weak",
        }

    def test_repair_inside_prose_and_fence(self):
        text = "Here you go:\n```json\n{\n  \"title\": \"Ağaç\",\n  \"evidence\": [\"roots\", \"canopy\",],\n}\n```"
        assert extract_json(text).data == {"title": "Ağaç", "evidence": ["roots", "canopy"]}

    def test_strict_json_preferred_over_repair(self):
        text = '{"ok": true} and later {broken: ,}'
        assert extract_json(text).data == {"ok": True}

    def test_unrepairable_text_still_fails(self):
        result = extract_json("{this is: not [json at all}")
        assert result.success is False
        assert result.data is None
