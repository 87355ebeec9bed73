from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from companytree import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the companytree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="companytree",
        description="Fetch companies and travels, roll travel cost up the company hierarchy "
                    "and print the resulting tree as JSON.",
    )

    # --- Sources ---
    p.add_argument(
        "--companies-url",
        dest="companies_url",
        default=None,
        help="Endpoint returning the JSON array of companies.",
    )
    p.add_argument(
        "--travels-url",
        dest="travels_url",
        default=None,
        help="Endpoint returning the JSON array of travels.",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 10; 0 waits indefinitely).",
    )

    # --- Hierarchy ---
    p.add_argument(
        "--root-id",
        dest="root_parent_id",
        default=None,
        help='Parent id of the top-level companies (default: "0").',
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Also write the JSON tree to this file.",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation width.",
    )
    p.add_argument(
        "--no-timing",
        action="store_true",
        help="Do not print the total elapsed time.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write diagnostic logs to a rotating file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid configuration values instead of using defaults.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None and are skipped during the merge.
    """
    overrides: Dict[str, Any] = {
        "companies_url": args.companies_url,
        "travels_url": args.travels_url,
        "timeout": args.timeout,
        "root_parent_id": args.root_parent_id,
        "output_path": args.output_path,
        "indent": args.indent,
    }

    if args.no_timing:
        overrides["show_timing"] = False

    return overrides
