from __future__ import annotations

import logging

from numgrids.geometry import Point
from numgrids.logging_config import setup_logging


def test_point_arithmetic() -> None:
    p = Point(1.0, 2.0)
    q = Point(0.5, -1.0)
    assert p + q == Point(1.5, 1.0)
    assert p - q == Point(0.5, 3.0)
    assert -p == Point(-1.0, -2.0)
    assert 2.0 * p == p * 2.0 == Point(2.0, 4.0)


def test_point_approx_equal() -> None:
    p = Point(1.0, 1.0)
    assert p.approx_equal(Point(1.0 + 5e-7, 1.0 - 5e-7))
    assert not p.approx_equal(Point(1.0 + 5e-6, 1.0))
    assert p.approx_equal(Point(1.0 + 5e-6, 1.0), eps=1e-5)


def test_setup_logging_does_not_duplicate_handlers(tmp_path) -> None:
    log_file = tmp_path / "numgrids.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "numgrids"
        assert len(logger.handlers) == 2
        logging.getLogger("numgrids.geometry.domain").debug("grid built")
        for h in logger.handlers:
            h.flush()
        assert "grid built" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        logger.setLevel(logging.NOTSET)
