# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime
from logging.handlers import RotatingFileHandler
from contract_clarity.config.settings import settings


class ContractClarityLogger:
    """
    Logging for contract analysis

    - main, error and performance loggers, each with its own rotating file
    - JSON payloads for structured messages
    - execution-time decorator for analysis entry points
    """
    APP_NAME                             = "contract_clarity"
    MAX_BYTES                            = 5 * 1024 * 1024
    BACKUP_COUNT                         = 3

    _loggers : Dict[str, logging.Logger] = dict()
    _log_dir : Optional[Path]            = None


    @classmethod
    def setup(cls, log_dir: Optional[Path] = None, level: Optional[str] = None):
        """
        Setup logging system

        Arguments:
        ----------
            log_dir { Path } : Directory for log files (defaults to settings.LOG_DIR)

            level   { str }  : Level name for the main logger (defaults to settings.LOG_LEVEL)
        """
        cls._log_dir = Path(log_dir or settings.LOG_DIR)
        cls._log_dir.mkdir(parents = True, exist_ok = True)

        main_level   = logging.getLevelName((level or settings.LOG_LEVEL).upper())

        cls._create_logger(name     = cls.APP_NAME,
                           log_file = cls._log_dir / f"{cls.APP_NAME}.log",
                           level    = main_level if isinstance(main_level, int) else logging.INFO,
                          )

        cls._create_logger(name     = f"{cls.APP_NAME}.error",
                           log_file = cls._log_dir / f"{cls.APP_NAME}_error.log",
                           level    = logging.ERROR,
                          )

        cls._create_logger(name     = f"{cls.APP_NAME}.performance",
                           log_file = cls._log_dir / f"{cls.APP_NAME}_performance.log",
                           level    = logging.INFO,
                          )


    @classmethod
    def _create_logger(cls, name: str, log_file: Path, level: int) -> logging.Logger:
        """
        Create and configure a logger
        """
        logger             = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate   = False

        logger.handlers.clear()

        file_handler       = RotatingFileHandler(log_file, maxBytes = cls.MAX_BYTES, backupCount = cls.BACKUP_COUNT, encoding = "utf-8")
        file_handler.setLevel(level)

        # Console only shows warnings and above
        console_handler    = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)

        formatter          = logging.Formatter(settings.LOG_FORMAT, datefmt = "%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: str = APP_NAME) -> logging.Logger:
        """
        Get logger by name, initializing lazily
        """
        if name not in cls._loggers:
            cls.setup()

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def log_structured(cls, log_level: int, message: str, /, **kwargs):
        """
        Log a message with structured context as JSON
        """
        logger   = cls.get_logger()

        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        logger.log(log_level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Exception, context: Dict[str, Any] = None):
        """
        Log error with traceback and context to the error log
        """
        error_logger = cls.get_logger(f"{cls.APP_NAME}.error")

        error_data   = {"timestamp"     : datetime.now().isoformat(),
                        "error_type"    : type(error).__name__,
                        "error_message" : str(error),
                        "traceback"     : traceback.format_exc(),
                        "context"       : context or {},
                       }

        error_logger.error(json.dumps(error_data, indent = 2, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Log duration of an operation to the performance log
        """
        perf_logger = cls.get_logger(f"{cls.APP_NAME}.performance")

        perf_data   = {"timestamp"        : datetime.now().isoformat(),
                       "operation"        : operation,
                       "duration_seconds" : round(duration, 3),
                       **metrics
                      }

        perf_logger.info(json.dumps(perf_data, default = str))


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator to log execution time of functions
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.perf_counter()

                try:
                    result = func(*args, **kwargs)

                except Exception as e:
                    ContractClarityLogger.log_performance(operation = op_name,
                                                          duration  = time.perf_counter() - start_time,
                                                          status    = "error",
                                                          error     = str(e),
                                                         )

                    ContractClarityLogger.log_error(e, context = {"operation" : op_name})
                    raise

                ContractClarityLogger.log_performance(operation = op_name,
                                                      duration  = time.perf_counter() - start_time,
                                                      status    = "success",
                                                     )

                return result

            return wrapper

        return decorator



# Convenience functions
def get_logger(name: str = ContractClarityLogger.APP_NAME) -> logging.Logger:
    return ContractClarityLogger.get_logger(name)


def log_info(message: str, /, **kwargs):
    ContractClarityLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, /, **kwargs):
    ContractClarityLogger.log_structured(logging.WARNING, message, **kwargs)


def log_debug(message: str, /, **kwargs):
    ContractClarityLogger.log_structured(logging.DEBUG, message, **kwargs)


def log_error(error: Exception, context: Dict[str, Any] = None):
    ContractClarityLogger.log_error(error, context)
