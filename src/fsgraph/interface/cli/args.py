from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from fsgraph.domain.config import START_POLICIES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fsgraph CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsgraph",
        description="Model a directory tree as a graph and run path queries on it.",
    )

    # --- Graph Construction ---
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to build the graph from (defaults to the configured root).",
    )
    p.add_argument(
        "--follow-symlinks",
        dest="follow_symlinks",
        action="store_true",
        default=None,
        help="Descend into symlinked directories (default). Symlink loops are not detected.",
    )
    p.add_argument(
        "--no-follow-symlinks",
        dest="follow_symlinks",
        action="store_false",
        default=None,
        help="Record symlinked directories as leaves instead of descending into them.",
    )

    # --- Queries ---
    p.add_argument(
        "--path",
        dest="path_queries",
        nargs=2,
        action="append",
        metavar=("SRC", "DST"),
        default=None,
        help="Shortest path query. Relative paths are resolved against the root. Repeatable.",
    )
    p.add_argument(
        "--tree",
        action="store_true",
        help="Compute the spanning tree reachable from the start vertex.",
    )
    p.add_argument(
        "--start",
        dest="start",
        default=None,
        help="Start vertex of the spanning tree.",
    )
    p.add_argument(
        "--start-policy",
        dest="start_policy",
        choices=START_POLICIES,
        default=None,
        help="Start vertex selection when --start is not given.",
    )

    # --- Output ---
    p.add_argument(
        "--show-graph",
        action="store_true",
        help="Print the full adjacency listing.",
    )
    p.add_argument(
        "--full-names",
        action="store_true",
        help="Label spanning tree entries with full paths.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit results as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read settings from this JSON file instead of the user data directory.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file (rotated).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only options explicitly set on the command line are returned.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.root:
        overrides["root_path"] = args.root
    if args.follow_symlinks is not None:
        overrides["follow_symlinks"] = args.follow_symlinks
    if args.start_policy:
        overrides["start_policy"] = args.start_policy
    if args.show_graph:
        overrides["show_graph"] = True
    if args.full_names:
        overrides["short_names"] = False
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
