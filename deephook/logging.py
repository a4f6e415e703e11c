"""
DeepHook Logging

Per-module leveled logging for the simulation core. Every subsystem gets its
own named logger so hook transitions, spawning and the economy can be traced
independently.

Usage:
    from deephook.logging import get_logger

    log = get_logger('hook')
    log.debug("Hook at y=%.1f", hook.y)
    log.info("Drop started")

Configuration:
    Environment variables:
        DEEPHOOK_LOG_LEVEL=DEBUG        # Global default level
        DEEPHOOK_LOG_SPAWNER=TRACE      # Module-specific level
        DEEPHOOK_LOG_ECONOMY=OFF

    Or programmatically:
        from deephook.logging import configure_logging
        configure_logging(level='DEBUG', modules={'spawner': 'INFO'})
"""

import os
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


_ENV_PREFIX = 'DEEPHOOK_LOG_'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


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


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    DEEPHOOK_LOG_LEVEL sets the default; any other DEEPHOOK_LOG_<MODULE>
    sets the level of that module (DEEPHOOK_LOG_HOOK=DEBUG -> hook: DEBUG).
    """
    level_key = _ENV_PREFIX + 'LEVEL'
    if level_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[level_key])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != level_key:
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class DeepHookLogger:
    """
    Logger for a specific module.

    Messages below the effective level of the module are dropped before
    formatting, so per-tick trace calls cost little when disabled.
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
        """Check if message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

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

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> DeepHookLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'hook', 'spawner', 'economy')

    Returns:
        DeepHookLogger instance for the module
    """
    return DeepHookLogger(module)


def enable_all_logging() -> None:
    """Enable DEBUG level for all modules."""
    configure_logging(level='DEBUG')


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
