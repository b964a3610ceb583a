"""
Logging for the FAO-56 reference ET library, built on loguru.

The package is disabled on import, so a program calling the formulas sees
no output until it calls ``Logger.setup()``. Level and file sink default to
the ``FAO_ETO_LOG_LEVEL`` and ``FAO_ETO_LOG_FILE`` environment variables.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.settings import get_logging_config

PACKAGE_NAME = "fao_eto"

logger.disable(PACKAGE_NAME)


class Logger:
    """
    Static front end to loguru for fao_eto.

    Formulas report clipped or capped values at DEBUG, rejected inputs at
    WARNING and usage errors at ERROR. Records are attributed to the formula
    that emitted them, so ``{name}`` and ``{function}`` in a sink format
    point at e.g. ``fao_eto.radiation.solar:sunset_hour_angle``.
    """

    _configured: dict = {}
    _handler_ids: list = []

    @staticmethod
    def setup(
        name: str = PACKAGE_NAME,
        log_file: Optional[str] = None,
        level: Optional[str] = None,
        console: bool = True,
    ) -> None:
        """
        Route fao_eto records to stderr and/or a rotating file.

        Sinks added by an earlier call are replaced. Handlers registered by
        the host application are left alone.

        Args:
            name: Key the configured logger is cached under
            log_file: File sink path, parent directories are created.
                Falls back to FAO_ETO_LOG_FILE
            level: Minimum level. Falls back to FAO_ETO_LOG_LEVEL, then INFO
            console: Add a colourised stderr sink

        Raises:
            ConfigurationError: If FAO_ETO_LOG_LEVEL names an unknown level
        """
        config = get_logging_config()
        level = (level or config["level"]).upper()
        log_file = log_file or config["log_file"]

        Logger._remove_own_handlers()
        if console:
            Logger._add_console_sink(config, level)
        if log_file:
            Logger._add_file_sink(Path(log_file), config, level)

        logger.enable(PACKAGE_NAME)
        Logger._configured[name] = logger

    @staticmethod
    def reset() -> None:
        """Remove the sinks added by ``setup()`` and silence the package again."""
        Logger._remove_own_handlers()
        Logger._configured.clear()
        logger.disable(PACKAGE_NAME)

    @staticmethod
    def _remove_own_handlers() -> None:
        while Logger._handler_ids:
            logger.remove(Logger._handler_ids.pop())

    @staticmethod
    def _add_console_sink(config: dict, level: str) -> None:
        handler_id = logger.add(sys.stderr, format=config["format"], level=level, colorize=True)
        Logger._handler_ids.append(handler_id)

    @staticmethod
    def _add_file_sink(path: Path, config: dict, level: str) -> None:
        # Closed and rotated files are gzip-compressed
        path.parent.mkdir(parents=True, exist_ok=True)
        handler_id = logger.add(
            str(path),
            format=config["format"],
            level=level,
            rotation=config["rotation"],
            retention=config["retention"],
            compression="gz",
        )
        Logger._handler_ids.append(handler_id)

    @staticmethod
    def get_logger(name: str = PACKAGE_NAME):
        """
        Return the loguru logger, configuring it with defaults on first use.

        Args:
            name: Cache key passed to ``setup()``

        Returns:
            The loguru logger
        """
        if name not in Logger._configured:
            Logger.setup(name=name)
        return Logger._configured[name]

    @staticmethod
    def _emit(level: str, message: str, **kwargs) -> None:
        # depth=2 skips _emit and the level helper
        logger.opt(depth=2).log(level, message, **kwargs)

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        Logger._emit("DEBUG", message, **kwargs)

    @staticmethod
    def info(message: str, **kwargs) -> None:
        Logger._emit("INFO", message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        Logger._emit("WARNING", message, **kwargs)

    @staticmethod
    def error(message: str, **kwargs) -> None:
        Logger._emit("ERROR", message, **kwargs)

    @staticmethod
    def exception(message: str, **kwargs) -> None:
        """Log at ERROR with the active exception's traceback."""
        logger.opt(depth=1, exception=True).error(message, **kwargs)

    @staticmethod
    def configure_for_testing() -> None:
        """Enable every formula message without writing anywhere visible."""
        Logger.setup(level="DEBUG", console=False)

    @staticmethod
    def configure_for_production(log_file: str = "logs/fao_eto.log") -> None:
        """Log INFO and above to stderr and a rotating file."""
        Logger.setup(log_file=log_file, level="INFO")
