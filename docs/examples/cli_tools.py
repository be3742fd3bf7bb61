import asyncio
import json

from dotenv import load_dotenv

from greyhack_mcp import InvocationRequest, Settings, ToolDispatcher, build_registry
from greyhack_mcp.core import ToolError

# Load environment variables
load_dotenv()


async def main() -> None:
    """
    Calls the Grey Hack tools in-process, without an MCP client.

    Each line is a tool name followed by optional JSON arguments, e.g.
    ``generate_greyhack_script {"script_type": "ssh_tool"}``.
    """
    print("Welcome to the Grey Hack tool shell!")

    settings = Settings()
    registry = build_registry(settings)
    dispatcher = ToolDispatcher(registry=registry, tool_timeout=settings.tool_timeout)
    print("Available tools: " + ", ".join(d.name for d in registry.list()))

    print("\nType 'exit' or 'quit' to stop.")
    while True:
        line = input("\n> ").strip()
        if line.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break

        if not line:
            continue

        name, _, arguments = line.partition(" ")
        try:
            result = await dispatcher.dispatch(InvocationRequest(tool_name=name, parameters=arguments.strip() or None))
        except ToolError as e:
            print(f"Rejected: {e}")
            continue

        print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
