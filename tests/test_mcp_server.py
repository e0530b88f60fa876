"""End-to-end tests: call the FastMCP server through an in-memory client."""

import asyncio

import pytest
from fastmcp import Client

from tools.mcp_server import mcp


def call_tool(name, arguments):
    async def _call():
        async with Client(mcp) as client:
            return await client.call_tool(name, arguments, raise_on_error=False)

    return asyncio.run(_call())


def text_of(result):
    return "".join(block.text for block in result.content)


class TestToolListing:
    def test_all_tools_registered(self):
        async def _list():
            async with Client(mcp) as client:
                return await client.list_tools()

        names = {tool.name for tool in asyncio.run(_list())}
        assert names == {
            "word_count",
            "format_currency",
            "slugify",
            "roman_numeral",
            "temperature_convert",
        }

    def test_parameter_schema(self):
        """Test that the generated schema exposes the documented parameters."""
        async def _list():
            async with Client(mcp) as client:
                return await client.list_tools()

        tools = {tool.name: tool for tool in asyncio.run(_list())}
        schema = tools["temperature_convert"].inputSchema
        assert set(schema["required"]) == {"value", "from_unit", "to_unit"}
        assert not tools["roman_numeral"].inputSchema.get("required")


class TestSuccessfulCalls:
    def test_word_count(self):
        result = call_tool("word_count", {"text": "Hello world"})
        assert not result.is_error
        assert result.structured_content == {
            "words": 2,
            "characters": 11,
            "characters_no_whitespace": 10,
            "lines": 1,
        }
        assert text_of(result).startswith("Words: 2")

    def test_format_currency(self):
        result = call_tool("format_currency", {"amount": 1234.56, "currency": "JPY"})
        assert text_of(result) == "¥1235"
        assert result.structured_content == {"formatted": "¥1235"}

    def test_slugify(self):
        result = call_tool("slugify", {"text": "Hello World! This is a Test."})
        assert text_of(result) == "hello-world-this-is-a-test"

    def test_roman_encode(self):
        result = call_tool("roman_numeral", {"number": 2024})
        assert text_of(result) == "MMXXIV"
        assert result.structured_content == {"roman": "MMXXIV"}

    def test_roman_decode(self):
        result = call_tool("roman_numeral", {"roman": "mcmxciv"})
        assert text_of(result) == "1994"
        assert result.structured_content == {"decimal": 1994, "canonical": True}

    def test_temperature(self):
        result = call_tool(
            "temperature_convert",
            {"value": 100, "from_unit": "celsius", "to_unit": "fahrenheit"},
        )
        assert text_of(result) == "212.00"
        assert result.structured_content == {"result": 212.0}


class TestErrorCalls:
    @pytest.mark.parametrize("arguments,message", [
        ({"number": 5, "roman": "V"}, "Please provide either 'number' or 'roman', not both"),
        ({}, "Please provide either 'number' or 'roman'"),
        ({"number": 4000}, "Number must be between 1 and 3999"),
        ({"roman": "X@"}, "invalid Roman numeral character: @"),
    ])
    def test_roman_errors(self, arguments, message):
        result = call_tool("roman_numeral", arguments)
        assert result.is_error
        assert message in text_of(result)
        assert not result.structured_content

    def test_both_message_differs_from_neither(self):
        both = text_of(call_tool("roman_numeral", {"number": 5, "roman": "V"}))
        neither = text_of(call_tool("roman_numeral", {}))
        assert "not both" in both
        assert "not both" not in neither

    def test_unsupported_currency(self):
        result = call_tool("format_currency", {"amount": 10, "currency": "CHF"})
        assert result.is_error
        assert "Unsupported currency: CHF" in text_of(result)

    def test_unknown_unit(self):
        result = call_tool(
            "temperature_convert",
            {"value": 10, "from_unit": "celsius", "to_unit": "rankine"},
        )
        assert result.is_error
        assert "unknown unit: rankine" in text_of(result)

    def test_wrong_argument_type_rejected(self):
        """Test that FastMCP's schema validation rejects ill-typed arguments."""
        result = call_tool("format_currency", {"amount": "lots", "currency": "USD"})
        assert result.is_error
