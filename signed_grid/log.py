import logging

# Library logging stays silent until the host attaches a handler.
logging.getLogger('signed_grid').addHandler(logging.NullHandler())


class GridLogger:
    """ Thin wrapper over the package's stdlib logger. The level of the underlying logger is only set on request. """

    _FORMATTER = logging.Formatter('[%(asctime)s]: %(message)s', "%b %d %Y %H:%M:%S")

    def __init__(self, name='signed_grid', level=None) -> None:
        self._logger = logging.getLogger(name)
        if level is not None:
            self.set_level(level)
        self._last_debug = ""  # Most recently logged debug string.

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level) -> None:
        """ Set the minimum level by number or by name (e.g. 'DEBUG'). """
        if isinstance(level, str):
            level = level.upper()
        self._logger.setLevel(level)

    def add_stream(self, stream=None) -> logging.Handler:
        stream_handler = logging.StreamHandler(stream)
        return self._attach_handler(stream_handler)

    def add_file(self, filename:str, **kwargs) -> logging.Handler:
        file_handler = logging.FileHandler(filename, encoding='utf-8', **kwargs)
        return self._attach_handler(file_handler)

    def remove_handler(self, handler:logging.Handler) -> None:
        self._logger.removeHandler(handler)
        handler.close()

    def _attach_handler(self, handler:logging.Handler) -> logging.Handler:
        handler.setFormatter(self._FORMATTER)
        self._logger.addHandler(handler)
        return handler

    def debug(self, msg:str) -> None:
        """ Log a debug event. Omit details if identical to the last debug event. """
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        if msg == self._last_debug:
            msg = "*"
        else:
            self._last_debug = msg
        self._logger.debug('%s', msg)


_LOGGER = GridLogger()


def get_logger() -> GridLogger:
    """ Return the logger shared by every container in the package. """
    return _LOGGER
