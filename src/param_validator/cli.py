"""
Command-line interface for param-validator.

Usage:
    param-validator check -r requirements.yaml -p params.json
    param-validator check -r requirements.yaml -p params.yaml --json
    param-validator list -r requirements.yaml
    param-validator --version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from . import __version__
from .config import load_config
from .errors import ParameterValidationError
from .requirements import Custom, Required, RequiredOneOf, Requirement


def load_params(path: Path) -> Dict[str, Any]:
    """Load provided parameters from a JSON or YAML file."""
    if not path.exists():
        raise FileNotFoundError(f"Params file not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Params file must contain a mapping: {path}")
    return data


def describe_requirement(requirement: Requirement) -> str:
    if isinstance(requirement, Required):
        return f"required  {requirement.name}"
    if isinstance(requirement, RequiredOneOf):
        return f"one-of    {', '.join(requirement.names)}"
    if isinstance(requirement, Custom):
        predicate = getattr(requirement.predicate, "__name__", repr(requirement.predicate))
        return f"custom    {requirement.name} ({predicate})"
    return repr(requirement)


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a params file against a requirements file."""
    try:
        config = load_config(args.requirements)
        params = load_params(Path(args.params))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    validator = config.build_validator()
    try:
        extracted = validator.validate(params, config.requirements)
    except ParameterValidationError as e:
        if args.json:
            print(json.dumps({"status": "FAIL", **e.to_dict()}, indent=2))
        else:
            print(f"FAIL {e.message}")
        return 1

    if args.json:
        print(json.dumps({"status": "PASS", "params": extracted}, indent=2, default=str))
    else:
        print("PASS")
        for name, value in extracted.items():
            print(f"  {name:25s} {value!r}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List the requirements in a requirements file."""
    try:
        config = load_config(args.requirements)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not config.requirements:
        print("No requirements configured.", file=sys.stderr)
        return 0

    print("Requirements:")
    for requirement in config.requirements:
        print(f"  {describe_requirement(requirement)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="param-validator",
        description="Validate parameters against declarative requirements",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"param-validator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate a params file")
    check_parser.add_argument(
        "--requirements", "-r",
        type=str,
        required=True,
        help="Path to requirements YAML file",
    )
    check_parser.add_argument(
        "--params", "-p",
        type=str,
        required=True,
        help="Path to JSON or YAML params file",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON result",
    )
    check_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each failing rule",
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List configured requirements")
    list_parser.add_argument(
        "--requirements", "-r",
        type=str,
        required=True,
        help="Path to requirements YAML file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "check":
        return cmd_check(args)
    elif args.command == "list":
        return cmd_list(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
