from gsapforge.tools.dispatcher import HANDLERS, ToolResult, UnknownToolError, call_tool, list_tools
from gsapforge.tools.schemas import TOOL_DEFINITIONS, TOOL_NAMES
from gsapforge.tools.validation import ArgumentValidator, ToolValidationError

__all__ = [
    "ArgumentValidator",
    "HANDLERS",
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "ToolResult",
    "ToolValidationError",
    "UnknownToolError",
    "call_tool",
    "list_tools",
]
