"""MCP server exposing notes and a CSV/Excel database update tool over stdio."""

import asyncio
import logging
import sys
from typing import Iterable

import anyio
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from dbupdater.config import INSTRUCTIONS, SERVER_NAME, SERVER_VERSION, LoadSettings
from dbupdater.database import LoggingDatabase
from dbupdater.dispatcher import BLOCKING_TOOLS, Dispatcher
from dbupdater.logging_config import SetupLogging
from dbupdater.notes import NotesStore


logger = logging.getLogger("dbupdater.server")


def CreateServer(dispatcher: Dispatcher) -> Server:
    """Create the MCP server, routing every request to the dispatcher."""

    app = Server(SERVER_NAME, version=SERVER_VERSION, instructions=INSTRUCTIONS)

    # Keep a reference for callers needing the notes store or the database writer
    setattr(app, "dispatcher", dispatcher)

    @app.list_resources()
    async def ListResources() -> list[types.Resource]:
        return dispatcher.ListResources()

    @app.read_resource()
    async def ReadResource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        return [
            ReadResourceContents(content=contents.text, mime_type=contents.mimeType)
            for contents in dispatcher.ReadResource(str(uri))
        ]

    @app.list_tools()
    async def ListTools() -> list[types.Tool]:
        return dispatcher.ListTools()

    # Registered as a raw request handler so that McpError codes reach the client
    # as JSON-RPC errors. Only tools parsing files run in a worker thread, the
    # notes store is only touched on the event loop.
    async def CallTool(request: types.CallToolRequest) -> types.ServerResult:
        name, arguments = request.params.name, request.params.arguments
        if name in BLOCKING_TOOLS:
            content = await anyio.to_thread.run_sync(dispatcher.CallTool, name, arguments)
        else:
            content = dispatcher.CallTool(name, arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    app.request_handlers[types.CallToolRequest] = CallTool

    @app.list_prompts()
    async def ListPrompts() -> list[types.Prompt]:
        return dispatcher.ListPrompts()

    @app.get_prompt()
    async def GetPrompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        return dispatcher.GetPrompt(name, arguments)

    return app


async def RunStdio(app: Server) -> None:
    """Serve requests on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def main() -> None:
    try:
        settings = LoadSettings()
        SetupLogging(settings.logLevel, settings.logFile or None)

        dispatcher = Dispatcher(NotesStore.Seeded(), LoggingDatabase(), settings.csvChunkSize)
        app = CreateServer(dispatcher)

        logger.info("Starting %s server on stdio", SERVER_NAME)
        asyncio.run(RunStdio(app))

    except Exception:
        logger.exception("Server error")
        sys.exit(1)


# Run the MCP server event loop
if __name__ == "__main__":
    main()
