"""Protocol errors raised by the dispatcher, as JSON-RPC code and message."""

from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


# MCP code for unknown resources
RESOURCE_NOT_FOUND = -32002


def InvalidParams(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def NotFound(message: str) -> McpError:
    return McpError(ErrorData(code=RESOURCE_NOT_FOUND, message=message))


def MethodNotFound(message: str) -> McpError:
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=message))


def InternalError(message: str) -> McpError:
    return McpError(ErrorData(code=INTERNAL_ERROR, message=message))
