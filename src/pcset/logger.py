"""
Logging infrastructure for PCSet.

All package loggers live under the ``pcset`` namespace. Their level and
optional log file come from the ``logging`` config section and can be
re-applied after the configuration changes, e.g. once the CLI has loaded
a config file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_LEVELS, get_config

ROOT_NAME = 'pcset'


def _level_from(name: Optional[str]) -> int:
    level = (name or 'WARNING').upper()
    if level not in LOG_LEVELS:
        level = 'WARNING'
    return getattr(logging, level)


class PCSetLogger:
    """Owns the handlers attached to the ``pcset`` logger."""
    
    def __init__(self):
        self._root = logging.getLogger(ROOT_NAME)
        self._root.propagate = False
        # stderr keeps CLI output on stdout clean
        self._console_handler = logging.StreamHandler(sys.stderr)
        self._root.addHandler(self._console_handler)
        self._file_handler: Optional[logging.FileHandler] = None
        self.configure()
    
    def configure(self) -> None:
        """Apply the ``logging`` config section to level, format and log file."""
        formatter = logging.Formatter(get_config('logging', 'format'))
        self._console_handler.setFormatter(formatter)
        self.set_level(get_config('logging', 'level'))
        
        if get_config('logging', 'file_logging'):
            self.enable_file_logging(get_config('logging', 'log_file'))
            self._file_handler.setFormatter(formatter)
        else:
            self.disable_file_logging()
    
    def get_logger(self, name: str) -> logging.Logger:
        if name == ROOT_NAME or name.startswith(ROOT_NAME + '.'):
            return logging.getLogger(name)
        return logging.getLogger(f'{ROOT_NAME}.{name}')
    
    def set_level(self, level: Optional[str]) -> None:
        log_level = _level_from(level)
        self._root.setLevel(log_level)
        self._console_handler.setLevel(log_level)
        if self._file_handler is not None:
            self._file_handler.setLevel(log_level)
    
    def enable_file_logging(self, log_file: Optional[str] = None) -> None:
        """Write package logs to ``log_file`` as well as stderr."""
        log_path = Path(log_file or get_config('logging', 'log_file') or 'pcset.log')
        
        if self._file_handler is not None:
            if Path(self._file_handler.baseFilename) == log_path.resolve():
                return
            self.disable_file_logging()
        
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_handler = logging.FileHandler(log_path)
        self._file_handler.setLevel(self._root.level)
        self._file_handler.setFormatter(self._console_handler.formatter)
        self._root.addHandler(self._file_handler)
    
    def disable_file_logging(self) -> None:
        if self._file_handler is None:
            return
        self._root.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None
    
    @property
    def file_handler(self) -> Optional[logging.FileHandler]:
        return self._file_handler


# Global logger manager instance
_logger_manager = PCSetLogger()


def get_logger(name: str = 'main') -> logging.Logger:
    """Get a logger instance for the specified module/component."""
    return _logger_manager.get_logger(name)


def get_cli_logger() -> logging.Logger:
    """Get logger for command line components."""
    return get_logger('cli')


def apply_logging_config() -> None:
    """Reconfigure logging from the current ``logging`` config section."""
    _logger_manager.configure()


def set_log_level(level: str) -> None:
    _logger_manager.set_level(level)


def enable_file_logging(log_file: Optional[str] = None) -> None:
    _logger_manager.enable_file_logging(log_file)


def disable_file_logging() -> None:
    _logger_manager.disable_file_logging()


def get_file_handler() -> Optional[logging.FileHandler]:
    """The file handler added by this package, if file logging is on."""
    return _logger_manager.file_handler
