import io
import json

import pytest

from dijkstrax import ConfigError, StdLogger


def test_plain_format_and_level_filter():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", x=1)
    log.info("solve", n=3, pops=2)
    log.info("done")
    assert buf.getvalue() == "info solve n=3 pops=2\ninfo done\n"


def test_warning_level_silences_solver_events():
    buf = io.StringIO()
    log = StdLogger(stream=buf)
    log.info("solve", n=3)
    log.debug("relax", vertex=2)
    assert buf.getvalue() == ""


def test_json_format():
    buf = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=buf).debug("relax", vertex=2, distance=7)
    assert json.loads(buf.getvalue()) == {
        "level": "debug",
        "event": "relax",
        "vertex": 2,
        "distance": 7,
    }


def test_unknown_level():
    with pytest.raises(ConfigError):
        StdLogger(level="trace")
