from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration loading and merging
(defaults, persistent storage, CLI overrides), logging bootstrap, graph
construction, query execution and result rendering.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from fsgraph.core.algorithms.shortest_path import shortest_path
from fsgraph.core.algorithms.spanning_tree import StartPolicy, minimum_spanning_tree
from fsgraph.core.graph.builder import GraphBuilder
from fsgraph.core.presentation.render import (
    render_build_errors,
    render_graph,
    render_path,
    render_spanning_tree,
)
from fsgraph.core.validator import validate_config
from fsgraph.domain.config import get_default_config, load_config
from fsgraph.domain.graph_models import (
    BuildResult,
    GraphError,
    ShortestPathResult,
    SpanningTree,
    build_result_to_dict,
    path_result_to_dict,
    spanning_tree_to_dict,
)
from fsgraph.infra.fs import LocalDirectoryEnumerator, resolve_query_path
from fsgraph.infra.logging import LoggingConfig, configure_logging, get_logger
from fsgraph.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ROOT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults vs persistent state, then overrides)
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = dict(base_conf)
    raw_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console stderr, optional rotating file)
    configure_logging(
        LoggingConfig.from_settings(conf),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    try:
        return _run(args, conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    root = conf["root_path"]
    builder = GraphBuilder(LocalDirectoryEnumerator(follow_symlinks=conf["follow_symlinks"]))
    build = builder.build(root)

    if not build.ok:
        msg = f"Root does not exist or is not a directory: {root}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_ROOT

    paths: List[ShortestPathResult] = []
    for src, dst in args.path_queries or []:
        paths.append(
            shortest_path(build.graph, resolve_query_path(src, root), resolve_query_path(dst, root))
        )

    tree: Optional[SpanningTree] = None
    if args.tree:
        start = resolve_query_path(args.start, root) if args.start else None
        try:
            tree = minimum_spanning_tree(build.graph, start=start, policy=StartPolicy(conf["start_policy"]))
        except GraphError as e:
            logger.error(f"Spanning tree failed: {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_FAILURE

    show_graph = conf["show_graph"] or (not paths and tree is None)
    if args.json_output:
        print(json.dumps(_to_json(build, paths, tree, show_graph), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(build, paths, tree, show_graph, conf["short_names"])

    return EXIT_OK if all(p.found for p in paths) else EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(
        build: BuildResult,
        paths: List[ShortestPathResult],
        tree: Optional[SpanningTree],
        show_graph: bool,
        short_names: bool,
) -> None:
    """Print graph, query results and skipped entries to stdout."""
    if show_graph:
        for line in render_graph(build.graph):
            print(line)

    for result in paths:
        for line in render_path(result):
            print(line)

    if tree is not None:
        for line in render_spanning_tree(tree, short_names=short_names):
            print(line)

    if build.errors:
        print(f"Skipped entries: {len(build.errors)}")
        for line in render_build_errors(build):
            print(line)


def _to_json(
        build: BuildResult,
        paths: List[ShortestPathResult],
        tree: Optional[SpanningTree],
        show_graph: bool,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"build": build_result_to_dict(build)}
    if show_graph:
        payload["graph"] = {
            str(v): [str(n) for n in neighbors] for v, neighbors in build.graph.adjacency().items()
        }
    payload["paths"] = [path_result_to_dict(p) for p in paths]
    payload["tree"] = spanning_tree_to_dict(tree) if tree is not None else None
    return payload

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
