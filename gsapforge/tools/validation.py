from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from gsapforge.tools.schemas import tool_definition

# Keywords whose failures reject a call. Enumerations are advisory.
FATAL_KEYWORDS = frozenset({"required", "type", "minLength", "pattern"})


@dataclass
class ToolValidationError(Exception):
    tool: str
    issues: list[dict[str, str]]

    def __str__(self) -> str:
        details = "; ".join(f"{row['path']}: {row['message']}" for row in self.issues)
        return f"Invalid arguments for {self.tool}: {details}"


class ArgumentValidator:
    @lru_cache(maxsize=16)
    def _validator(self, tool: str) -> Draft202012Validator | None:
        definition = tool_definition(tool)
        if definition is None:
            return None
        return Draft202012Validator(schema=definition["inputSchema"])

    def validate(self, tool: str, arguments: Any) -> None:
        validator = self._validator(tool)
        if validator is None:
            return
        errors = sorted(
            (err for err in validator.iter_errors(arguments) if err.validator in FATAL_KEYWORDS),
            key=lambda e: list(e.path),
        )
        if not errors:
            return
        raise ToolValidationError(tool=tool, issues=[self._format_error(err) for err in errors])

    @staticmethod
    def _format_error(error: ValidationError) -> dict[str, str]:
        if error.absolute_path:
            path = ".".join(str(part) for part in error.absolute_path)
        else:
            path = "$"
        message = error.message
        if error.validator in {"minLength", "pattern"}:
            message = "must be a non-empty string"
        return {"path": path, "message": message}


__all__ = ["ArgumentValidator", "FATAL_KEYWORDS", "ToolValidationError"]
