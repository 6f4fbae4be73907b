"""Command-line interface for the lwctest project."""

from __future__ import annotations

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import Any
from collections.abc import Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lwctest import __version__
from lwctest.core.config import LOG_LEVELS, CliSettings, parse_log_level, resolve_settings
from lwctest.core.errors import LwcTestError
from lwctest.core.flags import FLAG_REGISTRY
from lwctest.core.project import resolve_project_root
from lwctest.runner import TestRunPipeline
from lwctest.scaffold import create_test_file

PROG = "lwctest"

logger = logging.getLogger(__name__)


class CliError(LwcTestError):
    """Exception raised for anticipated CLI failures."""

    def __init__(self, message: str, *, exit_code: int = 1, details: Any | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.details = details


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, execute the requested command and return the exit code."""
    raw_argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    # Foreign tokens are legal for `run`; strictness is enforced per command below.
    args_namespace, extras = parser.parse_known_args(raw_argv)
    command = getattr(args_namespace, "command", None)
    if command is None:
        parser.print_help()
        return 1
    if extras and not getattr(args_namespace, "passthrough", False):
        parser.error(f"unrecognized arguments: {' '.join(extras)}")

    json_output = bool(getattr(args_namespace, "json", False))
    args_namespace.raw_tokens = _tokens_after_command(raw_argv, args_namespace.command_name)
    try:
        settings = resolve_settings()
        _configure_logging(LOG_LEVELS[args_namespace.loglevel or settings.loglevel])
        exit_code = command(args_namespace, settings)
    except CliError as error:
        _emit_error(error, json_output=json_output)
        exit_code = error.exit_code
    except KeyboardInterrupt as error:  # pragma: no cover - manual interruption
        cli_error = CliError("Aborted by user", exit_code=130, details=str(error))
        _emit_error(cli_error, json_output=json_output)
        exit_code = cli_error.exit_code
    except LwcTestError as error:
        cli_error = CliError(str(error), exit_code=1, details={"type": type(error).__name__})
        _emit_error(cli_error, json_output=json_output)
        exit_code = cli_error.exit_code
    except Exception as error:  # pragma: no cover - defensive guard
        cli_error = CliError("Unexpected error", exit_code=1, details=str(error))
        _emit_error(cli_error, json_output=json_output)
        exit_code = cli_error.exit_code
    return exit_code


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Create and run Lightning web component Jest tests.",
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    subparsers = parser.add_subparsers(dest="command_name")

    _configure_run(subparsers)
    _configure_create(subparsers)

    return parser


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Format output as JSON.",
    )
    parser.add_argument(
        "--loglevel",
        type=parse_log_level,
        default=None,
        help="Logging level: trace, debug, info, warn, error or fatal (default: warn).",
    )


def _configure_run(subparsers: Any) -> None:
    parser = subparsers.add_parser(
        "run",
        help="Invoke the project's sfdx-lwc-jest with the given flags.",
        description=(
            "Run Lightning web component Jest tests. Any flag or argument not "
            "listed below is forwarded to sfdx-lwc-jest unchanged."
        ),
        epilog=_run_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.set_defaults(command=_command_run, passthrough=True)
    _add_common_options(parser)


def _run_epilog() -> str:
    lines = ["runner flags handled by lwctest:"]
    width = max(len(definition.usage) for definition in FLAG_REGISTRY)
    for definition in FLAG_REGISTRY:
        summary = definition.summary
        if definition.exclusive:
            others = ", ".join(f"--{name}" for name in sorted(definition.exclusive))
            summary = f"{summary} Cannot be combined with {others}."
        lines.append(f"  {definition.usage.ljust(width)}  {summary}")
    return "\n".join(lines)


def _configure_create(subparsers: Any) -> None:
    parser = subparsers.add_parser(
        "create",
        help="Create a Jest test file for a Lightning web component.",
        allow_abbrev=False,
    )
    parser.set_defaults(command=_command_create, passthrough=False)
    parser.add_argument(
        "-f",
        "--filepath",
        dest="filepath",
        required=True,
        help="Path to the component's JavaScript module.",
    )
    _add_common_options(parser)


def _command_run(args: argparse.Namespace, settings: CliSettings) -> int:
    project_root = resolve_project_root(settings.project_root)
    logger.debug("Forwarding run tokens", extra={"tokens": args.raw_tokens})
    pipeline = TestRunPipeline(project_root=project_root, runner=subprocess.run)
    result = pipeline.run(args.raw_tokens)
    _emit_result(result, exit_code=result.jest_exit_code, json_output=args.json)
    return result.jest_exit_code


def _command_create(args: argparse.Namespace, settings: CliSettings) -> int:
    project_root = resolve_project_root(settings.project_root)
    logger.debug("Creating test file", extra={"project_root": str(project_root), "filepath": args.filepath})
    result = create_test_file(args.filepath, cwd=Path.cwd())
    _emit_result(result, exit_code=0, json_output=args.json)
    return 0


def _tokens_after_command(raw_argv: Sequence[str], command_name: str) -> list[str]:
    try:
        index = list(raw_argv).index(command_name)
    except ValueError:
        return []
    return list(raw_argv[index + 1 :])


def _configure_logging(level: int) -> None:
    package_logger = logging.getLogger(PROG)
    package_logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        package_logger.addHandler(handler)


def _emit_result(result: BaseModel, *, exit_code: int, json_output: bool) -> None:
    if json_output:
        payload = {"status": exit_code, "result": result.model_dump(mode="json", by_alias=True)}
        _write_json(payload, sys.stdout)
        return
    message = getattr(result, "message", "")
    _console().print(message, markup=False)


def _emit_error(error: CliError, *, json_output: bool) -> None:
    if json_output:
        payload: dict[str, Any] = {
            "status": "error",
            "message": str(error),
            "type": type(error).__name__,
            "exitCode": error.exit_code,
        }
        if error.details is not None:
            payload["details"] = error.details
        _write_json(payload, sys.stderr)
        return
    _console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(str(error))}")


def _console(*, stderr: bool = False) -> Console:
    return Console(stderr=stderr, soft_wrap=True, highlight=False)


def _write_json(payload: Any, stream: Any) -> None:
    serialized = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True, default=str)
    stream.write(serialized + "\n")
    stream.flush()


__all__ = ["CliError", "main"]
