#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import httpx  # noqa: E402

from gsapforge.config.runtime_config import (  # noqa: E402
    API_KEYS_ENV,
    configure_logging,
    current_values,
    load_settings,
    masked_state,
    validate_settings,
)
from gsapforge.tools.dispatcher import call_tool, list_tools  # noqa: E402
from gsapforge.versioning import project_identity  # noqa: E402

GATEWAY_APP = "gsapforge.gateway.app.main:app"


def _parse_value(raw: str) -> Any:
    text = raw.strip()
    if text.startswith(("[", "{")):
        try:
            return json.loads(text)
        except ValueError:
            return raw
    return raw


def build_arguments(pairs: list[str], json_payload: str | None) -> dict[str, Any]:
    arguments: dict[str, Any] = {}
    if json_payload:
        loaded = json.loads(json_payload)
        if not isinstance(loaded, dict):
            raise ValueError("--json must be a JSON object")
        arguments.update(loaded)
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"--arg expects key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        arguments[key.strip()] = _parse_value(value)
    return arguments


def cmd_tools() -> int:
    for row in list_tools():
        schema = row["inputSchema"]
        required = set(schema.get("required", []))
        params = ", ".join(f"{key}*" if key in required else key for key in schema.get("properties", {}))
        print(f"{row['name']:22} {row['description']}")
        print(f"{'':22} args: {params}")
    return 0


def _call_remote(url: str, tool: str, arguments: dict[str, Any], api_key: str) -> int:
    headers = {"x-api-key": api_key} if api_key else {}
    try:
        resp = httpx.post(
            f"{url.rstrip('/')}/v1/tools/{tool}",
            json={"arguments": arguments},
            headers=headers,
            timeout=30.0,
        )
    except httpx.HTTPError as exc:
        print(f"request failed: {exc}", file=sys.stderr)
        return 1
    try:
        payload = resp.json()
    except ValueError:
        print(f"gateway returned {resp.status_code}: {resp.text}", file=sys.stderr)
        return 1
    if resp.status_code != 200:
        detail = payload.get("detail", payload)
        message = detail.get("message", detail.get("error")) if isinstance(detail, dict) else detail
        print(message, file=sys.stderr)
        return 1
    print(payload.get("text", ""))
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    try:
        arguments = build_arguments(args.arg or [], args.json)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    if args.url:
        api_key = args.api_key or next(iter(load_settings().api_keys), "")
        return _call_remote(args.url, args.tool, arguments, api_key)
    result = call_tool(args.tool, arguments)
    if result.is_error:
        print(result.text, file=sys.stderr)
        return 1
    print(result.text)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        GATEWAY_APP,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def cmd_doctor() -> int:
    values = current_values()
    report = validate_settings(values)
    print(project_identity())
    for key, value in sorted(masked_state(values).items()):
        print(f"{key:30} {value}")
    for warning in report["warnings"]:
        print(f"warning: {warning}")
    for error in report["errors"]:
        print(f"error: {error}")
    print("config ok" if report["ok"] else "config invalid")
    return 0 if report["ok"] else 1


def cmd_version() -> int:
    print(project_identity())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gsapforge", description="GSAP Forge command line.")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tools", help="List available tools")

    call = sub.add_parser("call", help="Invoke a tool in-process or against a running gateway")
    call.add_argument("tool", help="Tool name")
    call.add_argument("--arg", action="append", metavar="KEY=VALUE", help="Tool argument (repeatable)")
    call.add_argument("--json", help="Tool arguments as a JSON object")
    call.add_argument("--url", help="Gateway base URL, e.g. http://127.0.0.1:8010")
    call.add_argument("--api-key", default=os.getenv("GSAPFORGE_CLI_API_KEY", ""), help=f"Defaults to the first {API_KEYS_ENV} entry")

    serve = sub.add_parser("serve", help="Run the HTTP gateway")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)

    sub.add_parser("doctor", help="Validate configuration")
    sub.add_parser("version", help="Print version")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 2
    configure_logging()
    if args.command == "tools":
        return cmd_tools()
    if args.command == "call":
        return cmd_call(args)
    if args.command == "serve":
        return cmd_serve(args)
    if args.command == "doctor":
        return cmd_doctor()
    if args.command == "version":
        return cmd_version()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
