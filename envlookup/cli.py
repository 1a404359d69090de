"""
ABOUTME: Command-line interface for typed environment variable lookups
ABOUTME: Handles argument parsing, .env loading, logging setup and result output
"""

import argparse
import json
import logging
import math
import sys
from datetime import timedelta
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .accessor import LookupResult, TypedEnvAccessor
from .must import MUST_WRAPPERS
from .parsers import TYPE_REGISTRY

console = Console()


def load_environment(env_file: str) -> None:
    """Load variables from a .env file without overriding ones already set."""
    try:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logging.debug(f"Loaded environment from {env_path}")
        else:
            logging.debug(f"No {env_path} file found, using process environment only")
    except Exception as e:
        console.print(f"❌ Error loading {env_file}: {e}")
        sys.exit(1)


def cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the envlookup tool.

    A --default is parsed with the selected type's parser here, so a malformed
    default is reported as a usage error.

    Returns:
        argparse.Namespace: Parsed arguments; ``default`` holds the typed default
        when --default was given and None otherwise.
    """
    p = argparse.ArgumentParser(
        description="Look up an environment variable as a typed value"
    )
    p.add_argument("name", nargs="?", help="Environment variable name")
    p.add_argument(
        "--type",
        dest="type_name",
        default="string",
        choices=list(TYPE_REGISTRY),
        help="Type to parse the variable as",
    )
    p.add_argument(
        "--default",
        dest="default_text",
        help="Default used when the variable is not set (parsed as --type)",
    )
    p.add_argument(
        "--must",
        action="store_true",
        help="Treat a missing or malformed variable as a fatal error",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output the result as JSON instead of a rich console table",
    )
    p.add_argument(
        "--env-file",
        default=".env",
        help="Path of a .env file to load before the lookup",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--list-types",
        action="store_true",
        help="List all supported value types",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"envlookup {__version__}",
    )
    args = p.parse_args(argv)

    if args.name is None and not args.list_types:
        p.error("the following arguments are required: name")

    if args.default_text is not None:
        try:
            args.default = TYPE_REGISTRY[args.type_name].parse(args.default_text)
        except ValueError as e:
            p.error(f"invalid --default for type {args.type_name}: {e}")
    else:
        args.default = None
    return args


def to_json_value(value: Any) -> Any:
    """Convert a looked-up value to a JSON-serializable one."""
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def render_result(name: str, type_name: str, result: LookupResult, as_json: bool) -> None:
    """Print a lookup result as JSON or as a rich table."""
    value, error = result
    if as_json:
        payload = {
            "name": name,
            "type": type_name,
            "value": to_json_value(value),
            "error": str(error) if error else None,
        }
        print(json.dumps(payload, allow_nan=False))
        return

    table = Table(title="Environment lookup")
    table.add_column("Variable", style="cyan")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Status")
    status = f"❌ {type(error).__name__}: {error}" if error else "✅ ok"
    table.add_row(name, type_name, repr(value), status)
    console.print(table)


def main(argv: Optional[List[str]] = None):
    """
    Execute the envlookup command.

    Parses arguments, configures logging, loads the .env file and performs the
    typed lookup. Exits with status 1 when the variable is missing or malformed,
    or, with --must, on the resulting fatal error.
    """
    a = cli(argv)

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )

    if a.list_types:
        console.print(f"🔌 Available types: {list(TYPE_REGISTRY)}")
        sys.exit(0)

    load_environment(a.env_file)

    try:
        accessor = TypedEnvAccessor()
        if a.default_text is not None:
            result = accessor.lookup(a.name, a.type_name, a.default)
        else:
            result = accessor.lookup(a.name, a.type_name)

        if a.must:
            result = LookupResult(MUST_WRAPPERS[a.type_name](result))

        render_result(a.name, a.type_name, result, a.json)
        if result.error is not None:
            sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user")
        sys.exit(1)
    except Exception as exc:
        console.print(f"❌ Fatal error: {exc}")
        logging.exception("Fatal error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
