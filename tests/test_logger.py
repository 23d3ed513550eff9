"""
Tests for the structured event logger.
"""

import io
import json

import pytest

from sptree.exceptions import ConfigError
from sptree.logger import NoopLogger, StdLogger, make_logger
from sptree.solver import SPTSolver


def test_text_format_and_level_filter():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", x=1)
    log.info("shown", root=0, reached=3)
    log.warning("careful")

    assert buf.getvalue().splitlines() == ["info shown root=0 reached=3", "warning careful"]


def test_json_format():
    buf = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=buf).debug("traversal", root=2)
    assert json.loads(buf.getvalue()) == {"level": "debug", "event": "traversal", "root": 2}


def test_unknown_level():
    with pytest.raises(ConfigError):
        StdLogger(level="trace")


def test_make_logger():
    assert isinstance(make_logger(None), NoopLogger)
    assert isinstance(make_logger("info"), StdLogger)


def test_solver_emits_events(triangle):
    buf = io.StringIO()
    SPTSolver(triangle, logger=StdLogger(level="debug", stream=buf)).diameter()
    lines = buf.getvalue().splitlines()

    assert len(lines) == 4
    assert lines[0] == "debug traversal root=0 reached=3 max_distance=2 furthest_vertex=2"
    assert lines[-1] == "info diameter start=0 end=2 distance=2 traversals=3"
