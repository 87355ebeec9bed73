from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs one end-to-end pass: logging bootstrap, configuration resolution,
aggregation, tree construction, JSON rendering and timing.
"""

import json
import sys
import time
from typing import Any, Dict, List, Optional

from companytree.core.services.aggregator import build_indexed_companies
from companytree.core.services.tree_builder import build_tree, render_tree_json, total_cost
from companytree.core.services.validator import validate_config
from companytree.domain.config import get_default_config
from companytree.domain.errors import ConfigError, TreeCycleError
from companytree.infra.fs import write_text
from companytree.infra.logging import LoggingConfig, configure_logging, get_logger
from companytree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failed run, 2 bad config, 130 interrupted).
    """
    start = time.perf_counter()

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    try:
        cfg, warnings = validate_config(raw_conf, strict=bool(args.strict))
    except ConfigError as e:
        logger.error(e.message)
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 2

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(cfg, ensure_ascii=False, indent=2))
        return 0

    try:
        exit_code = _run(cfg)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    if cfg["show_timing"]:
        print(f"Total time: {time.perf_counter() - start}")

    return exit_code

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(cfg: Dict[str, Any]) -> int:
    """Aggregate, build and render the tree. Returns the exit code."""
    result = build_indexed_companies(
        cfg["companies_url"],
        cfg["travels_url"],
        timeout=cfg["timeout"],
    )
    if not result.ok:
        print(result.error, file=sys.stderr)

    try:
        tree = build_tree(result.companies, cfg["root_parent_id"])
    except TreeCycleError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1

    logger.info(f"Built {len(tree)} top-level companies with total cost {total_cost(tree)}.")

    rendered = render_tree_json(tree, indent=cfg["indent"])
    print(rendered)

    if cfg["output_path"]:
        path = write_text(cfg["output_path"], rendered + "\n")
        logger.info(f"Tree written to {path}")

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into base."""
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
