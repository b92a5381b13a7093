""" Module for the logging options of the grid containers, stored in one section of a .cfg file. """

from configparser import ConfigParser
import sys
from typing import Any, Dict

from signed_grid.log import GridLogger, get_logger

ConfigDict = Dict[str, Any]


class GridConfig(ConfigDict):
    """ Logging options for the grid containers, backed by one section of a CFG file.
        Only the known options are read. Each is coerced to the type of its default. """

    DEFAULTS = {"log_level": "WARNING",  # Minimum level name for package log records.
                "log_file": "",          # Append log records to this file if not empty.
                "log_stderr": False}     # Also print log records to stderr.

    def __init__(self, filename:str, sect="signed_grid", *, encoding='utf-8') -> None:
        super().__init__(self.DEFAULTS)
        self._filename = filename  # Full name of valid file in CFG format.
        self._sect = sect          # Name of our CFG file section.
        self._encoding = encoding  # Character encoding of the CFG file.

    def _parse(self, parser:ConfigParser) -> None:
        """ Copy our section's known options out of <parser>. Unknown options and other sections are ignored. """
        if not parser.has_section(self._sect):
            return
        page = parser[self._sect]
        if "log_level" in page:
            self["log_level"] = page["log_level"].strip().upper() or self.DEFAULTS["log_level"]
        if "log_file" in page:
            self["log_file"] = page["log_file"].strip()
        if "log_stderr" in page:
            # getboolean accepts yes/no, on/off, true/false and 1/0, and raises ValueError on anything else.
            self["log_stderr"] = page.getboolean("log_stderr")

    def read(self) -> bool:
        """ Try to read config options from the CFG file. Return True if successful. """
        parser = ConfigParser(interpolation=None)
        try:
            with open(self._filename, 'r', encoding=self._encoding) as fp:
                parser.read_file(fp)
        except OSError:
            return False
        self._parse(parser)
        return True

    def write(self) -> bool:
        """ Write the current config options to the original CFG file under our section. Return True if successful.
            Other sections already in the file are kept. """
        parser = ConfigParser(interpolation=None)
        # Missing or unreadable files are skipped here; the write below reports the failure.
        parser.read(self._filename, encoding=self._encoding)
        if not parser.has_section(self._sect):
            parser.add_section(self._sect)
        page = parser[self._sect]
        page["log_level"] = str(self["log_level"])
        page["log_file"] = str(self["log_file"])
        page["log_stderr"] = "true" if self["log_stderr"] else "false"
        try:
            with open(self._filename, 'w', encoding=self._encoding) as fp:
                parser.write(fp)
            return True
        except OSError:
            return False


def configure_logging(config:ConfigDict, logger:GridLogger=None) -> GridLogger:
    """ Apply logging options from <config> to <logger> (default is the package logger) and return it. """
    if logger is None:
        logger = get_logger()
    logger.set_level(config.get("log_level") or GridConfig.DEFAULTS["log_level"])
    log_file = config.get("log_file")
    if log_file:
        logger.add_file(log_file)
    if config.get("log_stderr"):
        logger.add_stream(sys.stderr)
    return logger
