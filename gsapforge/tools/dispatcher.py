"""Named-tool dispatch.

``call_tool`` is the boundary for every transport: it validates arguments,
runs the handler and always returns a ``ToolResult``. Validation failures,
unknown tools and unexpected handler errors all come back as error results.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable

from gsapforge.tools.debugger import debug_request
from gsapforge.tools.environment import generate_setup
from gsapforge.tools.generate import classify_and_generate
from gsapforge.tools.optimizer import optimize_request
from gsapforge.tools.patterns import build_pattern
from gsapforge.tools.reference import lookup_reference
from gsapforge.tools.schemas import TOOL_DEFINITIONS
from gsapforge.tools.validation import ArgumentValidator, ToolValidationError

logger = logging.getLogger("gsapforge.dispatcher")

Handler = Callable[[dict[str, Any]], str]

HANDLERS: dict[str, Handler] = {
    "classify_and_generate": classify_and_generate,
    "lookup_reference": lookup_reference,
    "debug_request": debug_request,
    "optimize_request": optimize_request,
    "build_pattern": build_pattern,
    "generate_setup": generate_setup,
}

argument_validator = ArgumentValidator()


@dataclass
class UnknownToolError(Exception):
    tool: str

    def __str__(self) -> str:
        return f"Unknown tool: {self.tool}"


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False
    error_code: str | None = None

    def to_payload(self, tool: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "tool": tool,
            "is_error": self.is_error,
            "text": self.text,
            "content": [{"type": "text", "text": self.text}],
        }
        if self.error_code:
            payload["error"] = self.error_code
        return payload


def _error(code: str, message: str) -> ToolResult:
    flat = " ".join(str(message).split())
    return ToolResult(text=f"❌ Error: {flat}", is_error=True, error_code=code)


def list_tools() -> list[dict[str, Any]]:
    return copy.deepcopy(TOOL_DEFINITIONS)


def get_handler(name: str) -> Handler:
    handler = HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(tool=name)
    return handler


def call_tool(name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
    started = perf_counter()
    args = {} if arguments is None else arguments
    try:
        handler = get_handler(name)
        argument_validator.validate(name, args)
        text = handler(args)
    except UnknownToolError as exc:
        logger.warning("rejected call: %s", exc)
        return _error("unknown_tool", str(exc))
    except ToolValidationError as exc:
        logger.info("rejected call: %s", exc)
        return _error("validation_error", str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("tool %s failed", name)
        return _error("internal_error", f"{name} failed: {exc}")
    logger.info("tool %s completed in %.1fms", name, (perf_counter() - started) * 1000)
    return ToolResult(text=text)


__all__ = ["HANDLERS", "ToolResult", "UnknownToolError", "call_tool", "get_handler", "list_tools"]
