import logging
import logging.handlers
import os
import sys
import json
import threading
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime

class LogLevel(Enum):
    """Log levels enumeration"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class LogFormat(Enum):
    """Log format types"""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"

class StructuredFormatter(logging.Formatter):
    """Formatter that renders the structured fields attached by AdvancedLogger"""

    def __init__(self, fmt_type: LogFormat = LogFormat.DETAILED):
        self.fmt_type = fmt_type
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        structured_data = getattr(record, 'structured_data', {})

        if self.fmt_type == LogFormat.JSON:
            return self._format_json(record, structured_data)
        if self.fmt_type == LogFormat.SIMPLE:
            return f"{record.levelname}: {record.getMessage()}"
        return self._format_text(record, structured_data)

    def _format_json(self, record: logging.LogRecord, structured_data: Dict) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName or f"Thread-{record.thread}",
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if structured_data:
            log_entry["data"] = structured_data

        return json.dumps(log_entry, default=str)

    def _format_text(self, record: logging.LogRecord, structured_data: Dict) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        base_msg = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        if structured_data:
            base_msg += f" | {json.dumps(structured_data, default=str)}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        return base_msg

class LogManager:
    """Process-wide logging setup for the wallet"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.loggers = {}
        self.config = {
            'log_level': LogLevel.INFO,
            'log_format': LogFormat.DETAILED,
            'log_file': None,
            'max_file_size': 10 * 1024 * 1024,
            'backup_count': 5,
            'enable_console': True,
        }

        self._initialized = True

    def configure(self, config: Dict[str, Any]) -> None:
        self.config.update(config)

        root = logging.getLogger('rayonix_wallet')
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        root.setLevel(getattr(logging, self.config['log_level'].value))
        formatter = StructuredFormatter(self.config['log_format'])

        if self.config['enable_console']:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            root.addHandler(console_handler)

        if self.config.get('log_file'):
            log_dir = os.path.dirname(self.config['log_file'])
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                self.config['log_file'],
                maxBytes=self.config['max_file_size'],
                backupCount=self.config['backup_count'],
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    def get_logger(self, name: str) -> 'AdvancedLogger':
        if name not in self.loggers:
            self.loggers[name] = AdvancedLogger(name)
        return self.loggers[name]

class AdvancedLogger:
    """Logger that attaches keyword arguments as structured fields"""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _log_with_structure(self, level: int, msg: str, exc_info: bool = False, **kwargs) -> None:
        self.logger.log(level, msg, exc_info=exc_info, extra={'structured_data': dict(kwargs)})

    def debug(self, msg: str, **kwargs) -> None:
        self._log_with_structure(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs) -> None:
        self._log_with_structure(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._log_with_structure(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs) -> None:
        self._log_with_structure(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs) -> None:
        """Error logging with the current traceback"""
        self._log_with_structure(logging.ERROR, msg, exc_info=True, **kwargs)

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None,
                  log_format: str = "detailed", max_bytes: int = 10 * 1024 * 1024,
                  backup_count: int = 5) -> None:
    config = {
        'log_level': LogLevel(log_level.upper()),
        'log_format': LogFormat(log_format.lower()),
        'log_file': log_file,
        'max_file_size': max_bytes,
        'backup_count': backup_count,
    }

    LogManager().configure(config)

def get_logger(name: str) -> AdvancedLogger:
    return LogManager().get_logger(name)
