import json

import pytest

from helper.json_extraction import (
    extract_json_object,
    greedy_brace_match,
    parse_json_object,
    slice_outer_braces,
    strip_artifacts,
)


class TestStrategies:
    def test_greedy_brace_match_spans_first_to_last_brace(self):
        assert greedy_brace_match('x {"a": {"b": 1}} y') == '{"a": {"b": 1}}'

    def test_greedy_brace_match_without_braces(self):
        assert greedy_brace_match("no json here") is None

    def test_strip_artifacts_removes_fences_and_prose(self):
        text = 'Sure!\n```json\n{"a": 1}\n```\nHope this helps.'
        assert strip_artifacts(text) == '{"a": 1}'

    def test_strip_artifacts_returns_none_for_prose(self):
        assert strip_artifacts("I cannot help with that.") is None

    def test_slice_outer_braces(self):
        assert slice_outer_braces('lead {"a": 1} tail') == '{"a": 1}'

    @pytest.mark.parametrize("text", ["", "} before {", "only { open"])
    def test_slice_outer_braces_without_a_pair(self, text):
        assert slice_outer_braces(text) is None


class TestParseJsonObject:
    @pytest.mark.parametrize("candidate", [None, "", "[1, 2]", '"text"', "{not json}"])
    def test_rejects_non_objects(self, candidate):
        assert parse_json_object(candidate) is None

    def test_accepts_object(self):
        assert parse_json_object('{"score": 72}') == {"score": 72}


class TestExtractJsonObject:
    def test_plain_json(self):
        assert extract_json_object('{"overall_score": 72}') == {"overall_score": 72}

    def test_fenced_json_with_commentary(self):
        text = 'Here you go:\n```json\n{"overall_score": 72, "tags": ["a", "b"]}\n```\nLet me know!'
        assert extract_json_object(text) == {"overall_score": 72, "tags": ["a", "b"]}

    def test_trailing_commentary(self):
        assert extract_json_object('{"a": 1}\n\nThese numbers are estimates.') == {"a": 1}

    def test_braces_in_trailing_commentary_defeat_every_strategy(self):
        assert extract_json_object('{"a": 1}\nNote: numbers are estimates {sic}') is None

    def test_prose_only_yields_none(self):
        assert extract_json_object("I'm sorry, I can't evaluate this idea right now.") is None

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_input_yields_none(self, text):
        assert extract_json_object(text) is None

    def test_truncated_json_yields_none(self):
        assert extract_json_object('```json\n{"overall_score": 72, "strengths": ["a"\n```') is None

    def test_top_level_array_is_not_an_object(self):
        assert extract_json_object('[{"a": 1}]') is None

    def test_nested_objects_survive(self):
        payload = {"market_overview": {"market_size_usd": 1.5e9, "key_drivers": ["x"]}}
        assert extract_json_object(f"Result:\n{json.dumps(payload)}") == payload

    def test_extraction_is_idempotent_on_its_own_output(self):
        first = extract_json_object('prefix {"a":1} suffix')
        assert first == {"a": 1}
        assert extract_json_object(json.dumps(first)) == first

    def test_custom_strategy_order(self):
        calls = []

        def never(text):
            calls.append("never")
            return None

        assert extract_json_object('{"a": 1}', strategies=(never, slice_outer_braces)) == {"a": 1}
        assert calls == ["never"]
