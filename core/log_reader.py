"""Reading log lines from files."""

from pathlib import Path
from typing import Union

# Fixed sample used by --demo
SAMPLE_LOGS = [
    "Error: Disk full",
    "Warning: Memory low",
    "error: network down",
    "Error: Disk full",
]


class LogReadError(ValueError):
    """Raised when a log file cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read log file '{self.path}': {reason}")


def read_log_lines(path: Union[str, Path], encoding: str = "utf-8") -> list[str]:
    """
    Read a log file into a list of lines.

    Line terminators are stripped. The whole file is decoded up front so a
    bad byte fails the read instead of truncating the result.

    Args:
        path: Path to log file
        encoding: Text encoding of the file

    Returns:
        List of lines without line terminators

    Raises:
        LogReadError: If the file is missing, unreadable or not valid text
    """
    log_path = Path(path)
    if not log_path.exists():
        raise LogReadError(log_path, "file not found")
    if log_path.is_dir():
        raise LogReadError(log_path, "is a directory")

    try:
        text = log_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise LogReadError(log_path, f"not valid {encoding} text ({e.reason} at byte {e.start})") from e
    except LookupError as e:
        raise LogReadError(log_path, f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise LogReadError(log_path, e.strerror or str(e)) from e

    return text.splitlines()
