# =============================================================================
# main.py  —  Interactive Console for the Utility Tool Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Spawns the FastMCP server (tools/mcp_server.py) as a subprocess and
#      connects to it over stdio, exactly as any other MCP client would
#   2. Lists the tools the server advertises
#   3. Reads commands of the form   <tool> <json arguments>
#        word_count {"text": "Hello world"}
#        roman_numeral {"roman": "mmxxiv"}
#        temperature_convert {"value": 100, "from_unit": "celsius", "to_unit": "fahrenheit"}
#   4. Prints the text result and the structured payload, or the error
#
# The server's diagnostic log goes to stderr, so it shows up interleaved
# with this console's output in the same terminal.
# =============================================================================

import asyncio
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from fastmcp import Client
from fastmcp.client.transports import StdioTransport


PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))


class CommandError(ValueError):
    """Raised for console input that can't be turned into a tool call."""


def parse_command(line: str) -> tuple[str, dict]:
    """Split a console line into a tool name and its argument object.

    The arguments part is optional and must be a JSON object when present.

    >>> parse_command('slugify {"text": "Hi There"}')
    ('slugify', {'text': 'Hi There'})
    """
    line = line.strip()
    if not line:
        raise CommandError("Empty command")

    name, _, raw_args = line.partition(" ")
    raw_args = raw_args.strip()
    if not raw_args:
        return name, {}

    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as e:
        raise CommandError(f"Arguments are not valid JSON: {e.msg}") from e
    if not isinstance(arguments, dict):
        raise CommandError("Arguments must be a JSON object")
    return name, arguments


def server_transport() -> StdioTransport:
    """stdio transport that runs the tool server with this interpreter."""
    return StdioTransport(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
    )


async def run_console():
    print("=" * 70)
    print("  TEXT & UNIT UTILITY TOOLS")
    print("  MCP server over stdio, powered by FastMCP")
    print("=" * 70)

    async with Client(server_transport()) as client:
        tools = await client.list_tools()
        print("\n🔧 Available tools:")
        for tool in tools:
            print(f"   • {tool.name}: {tool.description.splitlines()[0] if tool.description else ''}")
        print("\n💬 Enter <tool> <json arguments>  (Type 'quit' to exit)")
        print("-" * 70)

        while True:
            try:
                line = input("\n> ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n\n👋 Goodbye!")
                break

            if line.lower() in ("quit", "exit", "q"):
                print("\n👋 Goodbye!")
                break
            if not line:
                continue

            try:
                name, arguments = parse_command(line)
            except CommandError as e:
                print(f"⚠️  {e}")
                continue

            result = await client.call_tool(name, arguments, raise_on_error=False)
            text = "\n".join(block.text for block in result.content if hasattr(block, "text"))

            if result.is_error:
                print(f"❌ {text}")
                continue

            print(text)
            if result.structured_content:
                print(f"   {json.dumps(result.structured_content, ensure_ascii=False)}")


if __name__ == "__main__":
    asyncio.run(run_console())
