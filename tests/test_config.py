import logging
import os

import pytest

from cachematrix.config import (
    DEFAULT_REPEATS,
    DEFAULT_SIZE,
    configure_logging,
    demo_settings,
    log_level,
)

_ENV = (
    "CACHEMATRIX_DEMO_SIZE",
    "CACHEMATRIX_DEMO_REPEATS",
    "CACHEMATRIX_SEED",
    "CACHEMATRIX_LOG_LEVEL",
)


def _clear_env(*names: str) -> None:
    for name in names:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def _clean_env():
    _clear_env(*_ENV)
    yield
    _clear_env(*_ENV)


def test_demo_settings_defaults():
    s = demo_settings()
    assert s.size == DEFAULT_SIZE
    assert s.repeats == DEFAULT_REPEATS
    assert s.seed is None


def test_demo_settings_from_env():
    os.environ["CACHEMATRIX_DEMO_SIZE"] = "16"
    os.environ["CACHEMATRIX_DEMO_REPEATS"] = "5"
    os.environ["CACHEMATRIX_SEED"] = "7"
    s = demo_settings()
    assert (s.size, s.repeats, s.seed) == (16, 5, 7)


def test_demo_settings_explicit_wins():
    os.environ["CACHEMATRIX_DEMO_SIZE"] = "16"
    assert demo_settings(size=4).size == 4


def test_demo_settings_invalid_env():
    os.environ["CACHEMATRIX_DEMO_SIZE"] = "big"
    with pytest.raises(ValueError, match="CACHEMATRIX_DEMO_SIZE"):
        demo_settings()


@pytest.mark.parametrize("kwargs", [{"size": 0}, {"repeats": -1}])
def test_demo_settings_rejects_non_positive(kwargs):
    with pytest.raises(ValueError):
        demo_settings(**kwargs)


def test_log_level_resolution():
    assert log_level() == logging.INFO
    assert log_level("debug") == logging.DEBUG
    os.environ["CACHEMATRIX_LOG_LEVEL"] = "warning"
    assert log_level() == logging.WARNING
    with pytest.raises(ValueError):
        log_level("chatty")


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("cachematrix")
    before = list(logger.handlers)
    try:
        configure_logging()
        configure_logging()
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.propagate is False
    finally:
        for h in logger.handlers[:]:
            if h not in before:
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def test_demo_settings_rejects_negative_seed():
    with pytest.raises(ValueError, match="seed"):
        demo_settings(seed=-1)


def test_demo_settings_rejects_negative_seed_from_env():
    os.environ["CACHEMATRIX_SEED"] = "-1"
    with pytest.raises(ValueError, match="seed"):
        demo_settings()


def test_demo_settings_accepts_zero_seed():
    assert demo_settings(seed=0).seed == 0
