"""
Pytest configuration for graph engine tests.

The library is exercised in-process through the `lib` fixture; CLI tests
go through a subprocess and JSON on stdout.
"""
import json
import os
import subprocess
import sys

import pytest

import cutgraph

PY_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "py")


@pytest.fixture
def lib():
    """The public graph API."""
    return cutgraph


@pytest.fixture
def build():
    """Read a graph from its text description."""
    def _build(text):
        return cutgraph.read_graph(text)
    return _build


class CliBridge:
    """Run the command-line interface in a subprocess."""

    def __init__(self, py_dir):
        self.py_dir = py_dir

    def run(self, *args, stdin="", env=None):
        full_env = dict(os.environ)
        full_env["PYTHONPATH"] = self.py_dir + os.pathsep + full_env.get("PYTHONPATH", "")
        full_env.update(env or {})
        return subprocess.run(
            [sys.executable, "-m", "cutgraph", *args],
            cwd=self.py_dir,
            input=stdin,
            capture_output=True,
            text=True,
            env=full_env,
        )

    def call(self, *args, stdin=""):
        result = self.run(*args, stdin=stdin)
        if result.returncode != 0:
            raise RuntimeError(result.stderr or result.stdout)
        return json.loads(result.stdout)


@pytest.fixture
def cli():
    return CliBridge(PY_DIR)
