"""Tests for Gemini reply parsing and client guards."""

from unittest.mock import MagicMock, patch

import pytest

from services import gemini_client
from services.gemini_client import extract_json


class TestExtractJson:
    def test_plain_object(self):
        assert extract_json('{"problem": "Two Sum"}') == {"problem": "Two Sum"}

    def test_object_wrapped_in_prose(self):
        text = 'Sure! Here it is:\n```json\n{"verdict": "Hire", "feedback": "ok"}\n```\nGood luck.'
        assert extract_json(text) == {"verdict": "Hire", "feedback": "ok"}

    def test_nested_object(self):
        text = '{"scores": {"correctness": 8}, "verdict": "Hire"}'
        assert extract_json(text) == {"scores": {"correctness": 8}, "verdict": "Hire"}

    def test_braces_inside_strings(self):
        text = '{"examples": "input: {1, 2} }"}'
        assert extract_json(text) == {"examples": "input: {1, 2} }"}

    def test_escaped_quote_inside_string(self):
        text = r'{"problem": "say \"hi\" {"}'
        assert extract_json(text) == {"problem": 'say "hi" {'}

    def test_first_object_only(self):
        assert extract_json('{"a": 1} then {"b": 2}') == {"a": 1}

    def test_no_object(self):
        assert extract_json("I cannot help with that.") is None
        assert extract_json("") is None

    def test_unbalanced(self):
        assert extract_json('{"a": 1') is None

    def test_invalid_json(self):
        assert extract_json("{not json}") is None


class TestGenerate:
    @pytest.mark.asyncio
    @patch("services.gemini_client.get_client")
    async def test_no_client_returns_none(self, mock_get):
        mock_get.return_value = None
        assert await gemini_client.generate_text("prompt") is None
        assert await gemini_client.generate_json("prompt") is None

    @pytest.mark.asyncio
    @patch("services.gemini_client.get_client")
    async def test_generate_json_parses_reply(self, mock_get):
        client = MagicMock()
        client.models.generate_content.return_value.text = 'Here: {"problem": "LRU cache"}'
        mock_get.return_value = client
        assert await gemini_client.generate_json("prompt") == {"problem": "LRU cache"}

    @pytest.mark.asyncio
    @patch("services.gemini_client.get_client")
    async def test_api_error_returns_none(self, mock_get):
        client = MagicMock()
        client.models.generate_content.side_effect = RuntimeError("quota exceeded")
        mock_get.return_value = client
        assert await gemini_client.generate_text("prompt") is None
