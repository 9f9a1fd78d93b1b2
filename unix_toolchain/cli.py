"""Diagnostic CLI for toolchain resolution.

Examples:
  unix-toolchain tool clang
  unix-toolchain --json which ld.lld
  unix-toolchain linker-output Foo --type dynamic-library
  unix-toolchain runtime-lib address x86_64-unknown-linux-gnu
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from typing import Any, Optional

from . import __version__
from .config import config_from_env, load_config
from .errors import ToolNotFoundError
from .models import LinkOutputType, Sanitizer, Tool
from .toolchain import GenericUnixToolchain
from .triple import Triple

logger = logging.getLogger(__name__)


def _print(obj: Any, *, json_mode: bool) -> None:
    if json_mode:
        print(json.dumps(obj, indent=2, sort_keys=True))
    else:
        if isinstance(obj, str):
            print(obj)
        else:
            print(json.dumps(obj, indent=2, sort_keys=True))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unix-toolchain",
        description="Resolve compiler driver tools on Unix-like systems",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--json", action="store_true", help="Emit machine-parseable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log lookup steps to stderr")
    parser.add_argument("--config", default=None, help="YAML toolchain config file")
    parser.add_argument(
        "--executable-dir",
        default=None,
        help="Directory searched before PATH (default: the driver's directory)",
    )
    parser.add_argument("--no-fallback", action="store_true", help="Disable the platform fallback")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_tool = sub.add_parser("tool", help="Resolve a tool role")
    p_tool.add_argument("tool", choices=[t.value for t in Tool])

    p_which = sub.add_parser("which", help="Resolve an executable name")
    p_which.add_argument("executable")

    sub.add_parser("search-paths", help="Show the directories derived from PATH")

    p_out = sub.add_parser("linker-output", help="Show the linker output file name")
    p_out.add_argument("module")
    p_out.add_argument(
        "--type",
        dest="output_type",
        choices=[t.value for t in LinkOutputType],
        default=LinkOutputType.EXECUTABLE.value,
    )

    p_rt = sub.add_parser("runtime-lib", help="Show a sanitizer runtime library name")
    p_rt.add_argument("sanitizer", help="address, thread, undefined, fuzzer or scudo")
    p_rt.add_argument("triple", help="Target triple, e.g. x86_64-unknown-linux-gnu")
    p_rt.add_argument("--shared", action="store_true", help="Ask for the shared runtime")

    sub.add_parser("sdk", help="Show the default SDK path")

    return parser


def _make_toolchain(args: argparse.Namespace) -> GenericUnixToolchain:
    env = dict(os.environ)
    config = load_config(args.config) if args.config else config_from_env(env)
    if args.executable_dir:
        config = replace(config, executable_dir=args.executable_dir)
    if args.no_fallback:
        config = replace(config, fallback="none")
    return GenericUnixToolchain.from_config(env, config)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``unix-toolchain`` CLI.

    Args:
        argv: Argument list to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code: 0 on success, 1 on error.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        toolchain = _make_toolchain(args)

        if args.cmd == "tool":
            tool = Tool.from_name(args.tool)
            path = toolchain.get_tool_path(tool)
            result: Any = {"tool": tool.value, "executable": tool.executable_name, "path": path}
            text: str = path
        elif args.cmd == "which":
            path = toolchain.lookup(args.executable)
            result = {"executable": args.executable, "path": path}
            text = path
        elif args.cmd == "search-paths":
            result = {"executable_dir": toolchain.executable_dir, "search_paths": list(toolchain.search_paths)}
            text = "\n".join([toolchain.executable_dir, *toolchain.search_paths])
        elif args.cmd == "linker-output":
            name = toolchain.make_linker_output_filename(args.module, LinkOutputType.from_name(args.output_type))
            result = {"module": args.module, "type": args.output_type, "filename": name}
            text = name
        elif args.cmd == "runtime-lib":
            triple = Triple.parse(args.triple)
            name = toolchain.runtime_library_name(Sanitizer.from_name(args.sanitizer), triple, args.shared)
            result = {"sanitizer": args.sanitizer, "triple": str(triple), "shared": args.shared, "library": name}
            text = name
        elif args.cmd == "sdk":
            sdk = toolchain.default_sdk_path()
            result = {"sdk_path": sdk}
            text = sdk if sdk is not None else "none"
        else:
            parser.error(f"unknown command: {args.cmd}")
    except (ToolNotFoundError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        if args.json:
            _print({"error": str(e)}, json_mode=True)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    _print(result if args.json else text, json_mode=args.json)
    return 0
