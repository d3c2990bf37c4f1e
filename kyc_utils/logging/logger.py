import logging
import sys
from typing import ClassVar, TextIO


class Log:
    """Library-wide logging facade over the ``kyc_utils`` logger.

    Callers never pass raw personal strings here; log the classification or
    the length instead.
    """

    FORMAT: ClassVar[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    _logger: ClassVar[logging.Logger] = logging.getLogger("kyc_utils")
    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and (re)attach the library's own stream handler.

        Args:
            log_level: Level name, case-insensitive (``"debug"``, ``"INFO"``).
            stream: Destination for records; defaults to stdout.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(cls.FORMAT))
        cls._logger.addHandler(handler)
        cls._handler = handler

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
