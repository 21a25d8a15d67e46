"""Read a log file into an ordered list of lines.

Line terminators (\\n, \\r\\n, \\r) are stripped. Blank lines are kept as
empty strings; a final trailing newline does not add one.
"""
from pathlib import Path

from .core.constants import LINE_ENCODING
from .core.errors import InputUnavailable


def read_lines(path: str, encoding: str = LINE_ENCODING) -> list[str]:
    """Read all lines of a text file.

    Args:
        path: Path to the log file
        encoding: Text encoding of the file

    Returns:
        Lines in file order, without terminators

    Raises:
        InputUnavailable: If the file is missing or cannot be read
    """
    log_path = Path(path)
    if not log_path.is_file():
        raise InputUnavailable(f"File does not exist: {path}")

    try:
        with open(log_path, "r", encoding=encoding, newline=None) as f:
            return [line[:-1] if line.endswith("\n") else line for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(f"A problem occurred reading {path}: {e}") from e
