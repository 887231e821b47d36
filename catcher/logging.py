"""
Coffee Catcher Logging

Consistent, dependency-free logging for the simulation engine and the
pygame front end. Supports per-module log levels configured from the
environment or programmatically.

Usage:
    from catcher.logging import get_logger

    log = get_logger('engine')
    log.debug("Spawned item at x=%.1f", x)
    log.info("Game over")

Configuration:
    Environment variables:
        CATCHER_LOG_LEVEL=DEBUG        # Global default level
        CATCHER_LOG_ENGINE=TRACE       # Module-specific level
        CATCHER_LOG_RENDERER=WARNING

    Or programmatically:
        from catcher.logging import configure_logging
        configure_logging(level='DEBUG', modules={'spawning': 'TRACE'})
"""

import os
import sys
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_ENV_PREFIX = 'CATCHER_LOG_'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'stream': None,          # None = sys.stdout at write time
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    stream: Optional[Any] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        stream: File-like object to write to (default: stdout)
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)

    _config['stream'] = stream


def _load_env_config() -> None:
    """Load configuration from environment variables.

    CATCHER_LOG_LEVEL sets the global level; any other CATCHER_LOG_<MODULE>
    sets the level of that module (CATCHER_LOG_ENGINE=DEBUG -> engine: DEBUG).
    """
    if 'CATCHER_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['CATCHER_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != 'CATCHER_LOG_LEVEL':
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class CatcherLogger:
    """
    Logger for a specific module.

    Messages use printf-style formatting, applied only when the
    message is actually emitted.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        stream = _config['stream'] or sys.stdout
        print(_format_message(self.module, level_name, msg), file=stream)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> CatcherLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'engine', 'spawning', 'renderer')

    Returns:
        CatcherLogger instance for the module
    """
    return CatcherLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def reset_logging() -> None:
    """Restore defaults and re-read the environment."""
    _config['default_level'] = LogLevel.INFO
    _config['module_levels'].clear()
    _config['stream'] = None
    _load_env_config()
