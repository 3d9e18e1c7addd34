from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stdout/stderr content and JSON output for real directory trees.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "fsgraph" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    HOME points at a scratch directory so no user configuration leaks in.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT), "--use-defaults"] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


def test_cli_prints_adjacency_by_default(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli([str(sample_tree)], home=tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    lines = result.stdout.splitlines()
    assert lines[0] == f"{sample_tree}:"
    assert f"  {sample_tree / 'src'}" in lines


def test_cli_shortest_path_and_tree(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli(
        [str(sample_tree), "--path", ".", "src/pkg/core.py", "--tree"],
        home=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert "(3 hops)" in result.stdout
    assert "└── src" in result.stdout
    assert "        └── core.py" in result.stdout


def test_cli_no_path_exit_code(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli([str(sample_tree), "--path", "README.md", "docs"], home=tmp_path)

    assert result.returncode == 1
    assert "No path from" in result.stdout


def test_cli_handles_missing_root(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "non_existent_folder")], home=tmp_path)

    assert result.returncode == 2
    assert "does not exist or is not a directory" in result.stderr


def test_cli_json_output_structure(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli(
        [str(sample_tree), "--json", "--tree", "--path", "src", "src/main.py"],
        home=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["build"]["status"] == "success"
    assert data["build"]["vertices"] == 8
    assert data["paths"][0]["hops"] == 1
    assert data["tree"]["root"] == str(sample_tree)
    assert data["tree"]["edge_count"] == 7
    assert "graph" not in data


def test_cli_dump_config(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli([str(sample_tree), "--dump-config", "--start-policy", "insertion"], home=tmp_path)

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["root_path"] == str(sample_tree)
    assert data["start_policy"] == "insertion"
