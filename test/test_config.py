""" Unit tests for logging and CFG file configuration. """

import io
import logging

import pytest

from signed_grid import GridConfig, GridLogger, SignedAxis, SparseGrid, configure_logging, get_logger


def test_config_reads_known_options(tmp_path) -> None:
    cfg_path = tmp_path / "grid.cfg"
    cfg_path.write_text("[signed_grid]\nlog_level = info\nlog_stderr = yes\nunknown = 5\n"
                        "[other]\nlog_level = ERROR\n", encoding="utf-8")
    config = GridConfig(str(cfg_path))
    assert config.read()
    # Level names are normalized and booleans are parsed the configparser way.
    assert config["log_level"] == "INFO"
    assert config["log_stderr"] is True
    # Missing options keep their defaults, and unknown ones are never picked up.
    assert config["log_file"] == ""
    assert "unknown" not in config


def test_config_bad_boolean(tmp_path) -> None:
    cfg_path = tmp_path / "grid.cfg"
    cfg_path.write_text("[signed_grid]\nlog_stderr = sometimes\n", encoding="utf-8")
    with pytest.raises(ValueError):
        GridConfig(str(cfg_path)).read()


def test_config_missing_file(tmp_path) -> None:
    config = GridConfig(str(tmp_path / "nope" / "grid.cfg"))
    assert not config.read()
    assert config == GridConfig.DEFAULTS
    assert not config.write()


def test_config_write_then_read(tmp_path) -> None:
    """ Writing our section must keep every other section of the file intact. """
    cfg_path = tmp_path / "grid.cfg"
    cfg_path.write_text("[app]\nname = demo\n", encoding="utf-8")
    config = GridConfig(str(cfg_path), "custom")
    config["log_level"] = "ERROR"
    config["log_file"] = "grid.log"
    config["log_stderr"] = True
    assert config.write()
    other = GridConfig(str(cfg_path), "custom")
    assert other.read()
    assert other == config
    assert "[app]\nname = demo" in cfg_path.read_text(encoding="utf-8")


def test_configure_logging(tmp_path) -> None:
    log_path = tmp_path / "grid.log"
    logger = GridLogger("signed_grid.test_configure")
    configure_logging({"log_level": "debug", "log_file": str(log_path)}, logger)
    handlers = logging.getLogger("signed_grid.test_configure").handlers[:]
    try:
        assert logger.level == logging.DEBUG
        logger.debug("first")
        logger.debug("first")
        logger.debug("second")
    finally:
        for handler in handlers:
            logger.remove_handler(handler)
    assert not logging.getLogger("signed_grid.test_configure").handlers
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert [line.split(": ", 1)[1] for line in lines] == ["first", "*", "second"]
    assert all(line.startswith("[") for line in lines)


def test_logger_silent_below_level() -> None:
    stream = io.StringIO()
    logger = GridLogger("signed_grid.test_silent", logging.WARNING)
    handler = logger.add_stream(stream)
    try:
        logger.debug("hidden")
    finally:
        logger.remove_handler(handler)
    assert stream.getvalue() == ""


def test_logger_keeps_host_level() -> None:
    """ Making a logger for a name the host already configured must not change its level. """
    host = logging.getLogger("signed_grid.test_host")
    host.setLevel(logging.ERROR)
    GridLogger("signed_grid.test_host")
    assert host.level == logging.ERROR
    GridLogger("signed_grid.test_host", "info")
    assert host.level == logging.INFO


def test_package_logger_has_one_null_handler() -> None:
    GridLogger()
    GridLogger()
    package = logging.getLogger("signed_grid")
    assert sum(isinstance(h, logging.NullHandler) for h in package.handlers) == 1


def test_containers_log_growth() -> None:
    """ The shared package logger reports growth and new columns when DEBUG is enabled. """
    stream = io.StringIO()
    logger = get_logger()
    old_level = logger.level
    handler = logger.add_stream(stream)
    logger.set_level("DEBUG")
    try:
        axis = SignedAxis()
        axis.set(-3, "a")
        axis.set(-1, "b")
        grid = SparseGrid()
        grid.set(2, 0, "c")
    finally:
        logger.set_level(old_level)
        logger.remove_handler(handler)
    text = stream.getvalue()
    assert "SignedAxis: grew negative side to 3 slots" in text
    assert "SparseGrid: grew positive side to 3 slots" in text
    assert "SparseGrid: created column 2" in text
    # The second axis write needed no growth.
    assert text.count("SignedAxis: grew negative side") == 1
