# Path validation for the organize target and the running program

import os
import sys
from pathlib import Path
from typing import Optional
from .logger import get_logger


WHITESPACE = " \t\n\r\f\v"
QUOTES = "\"'"

# Arguments that select the process working directory instead of a path
CURRENT_DIRECTORY_FLAGS = ("--current", "-c", "-C")


class ValidationError(Exception):
    """Custom exception for validation errors"""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class PathNotFound(ValidationError):
    """The target path does not exist"""

    def __init__(self, path: str):
        super().__init__(f"The specified path does not exist: '{path}'", path)


class NotADirectory(ValidationError):
    """The target path exists but is not a directory"""

    def __init__(self, path: str):
        super().__init__(f"The specified path is not a directory: '{path}'", path)


def trim_path(raw: Optional[str]) -> str:
    """
    Trim a command-line path argument

    Whitespace is stripped from both ends first, then any run of single or
    double quote characters. Input made only of whitespace or quotes
    becomes an empty string.
    """
    if not raw:
        return ""
    return raw.strip(WHITESPACE).strip(QUOTES)


class PathValidator:
    """
    Resolves the directory to organize and the path of the running program

    Nothing is modified on disk; every check happens before the first
    folder is created.
    """

    def __init__(self):
        self.logger = get_logger()

    def resolve_target_directory(self, raw: Optional[str]) -> Path:
        """
        Validate the directory to organize

        Args:
            raw: Argument as typed by the user, possibly quoted or padded

        Returns:
            Canonical absolute Path of the directory

        Raises:
            PathNotFound: If nothing exists at the path
            NotADirectory: If the path exists but is not a directory
        """
        argument = trim_path(raw)

        if argument in CURRENT_DIRECTORY_FLAGS:
            target = Path(os.getcwd())
            self.logger.debug(f"📂 Using current working directory: {target}")
        elif not argument:
            # Path("") means "." to pathlib, an empty argument names nothing
            raise PathNotFound(argument)
        else:
            target = Path(argument).expanduser()

        if not target.exists():
            raise PathNotFound(str(target))

        if not target.is_dir():
            raise NotADirectory(str(target))

        target = target.resolve(strict=True)
        self.logger.debug(f"✅ Target directory validated: {target}")
        return target

    def resolve_self_path(self, argv0: Optional[str] = None) -> Path:
        """
        Canonical path of the running program

        Resolved non-strictly so the result stays comparable even when
        argv[0] no longer points at an existing file.
        """
        if argv0 is None:
            argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""

        self_path = Path(argv0).resolve() if argv0 else Path()
        self.logger.debug(f"🔒 Program path excluded from moves: {self_path}")
        return self_path


# Global validator instance
_global_validator: Optional[PathValidator] = None


def get_validator() -> PathValidator:
    """
    Get or create the global validator instance

    Returns:
        PathValidator instance
    """
    global _global_validator
    if _global_validator is None:
        _global_validator = PathValidator()
    return _global_validator
