# Activity logging utility

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
import colorama
from colorama import Fore, Back, Style

# Enable ANSI colours on Windows consoles without wrapping sys.stdout
colorama.just_fix_windows_console()


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels"""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, '')
        record.colored_levelname = f"{log_color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


class FileOrganizerLogger:
    """
    Centralized logging for extsort

    Console output goes to stderr with coloured level names. A dated log
    file is written only when a log directory is configured.
    """

    def __init__(self, name: str = "extsort", log_dir: Optional[str] = None,
                 verbose: bool = False):
        self.name = name
        self.log_dir = Path(log_dir) if log_dir else None
        self.verbose = verbose
        self.log_file: Optional[Path] = None
        self.logger = None
        self._setup_logging()

    def _setup_logging(self):
        """Initialize the logging system"""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(logging.DEBUG)

        # Drop handlers from a previous configuration
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_formatter = ColoredFormatter(
            '%(asctime)s | %(colored_levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

            file_formatter = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

            self.log_file = self.log_dir / f"{self.name}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def configure(self, verbose: bool = False, log_dir: Optional[str] = None):
        """Rebuild handlers with new verbosity and log directory"""
        self.verbose = verbose
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file = None
        self._setup_logging()

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def log_operation_start(self, operation: str, details: str = ""):
        """Log the start of an operation"""
        message = f"🚀 Starting operation: {operation}"
        if details:
            message += f" | {details}"
        self.info(message)

    def log_operation_success(self, operation: str, details: str = ""):
        """Log successful completion of an operation"""
        message = f"✅ Completed operation: {operation}"
        if details:
            message += f" | {details}"
        self.info(message)

    def log_operation_error(self, operation: str, error: str):
        """Log operation failure"""
        self.error(f"❌ Failed operation: {operation} | Error: {error}")

    def log_file_action(self, action: str, source: str, destination: str = ""):
        """Log file operations (move, skip)"""
        message = f"📁 {action}: {source}"
        if destination:
            message += f" → {destination}"
        self.debug(message)

    def log_stats(self, stats_dict: dict):
        """Log operation statistics"""
        self.info("📊 Operation Statistics:")
        for key, value in stats_dict.items():
            self.info(f"   {key}: {value}")


# Global logger instance
_global_logger: Optional[FileOrganizerLogger] = None


def get_logger(name: str = "extsort") -> FileOrganizerLogger:
    """
    Get or create the global logger instance

    Args:
        name: Logger name

    Returns:
        FileOrganizerLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FileOrganizerLogger(name)
    return _global_logger


def setup_logging(verbose: bool = False, log_dir: Optional[str] = None) -> FileOrganizerLogger:
    """
    Setup logging with specified verbosity

    Args:
        verbose: If True, set console output to DEBUG level
        log_dir: Directory for log files, or None for console only

    Returns:
        Configured logger instance
    """
    logger = get_logger()
    logger.configure(verbose=verbose, log_dir=log_dir)

    if verbose:
        logger.debug("🔧 Verbose logging enabled")

    return logger
