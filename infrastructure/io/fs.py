"""Filesystem utility functions."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_text(path: Path) -> str:
    """Read a UTF-8 text file (a local vocabulary or list document), stripping outer whitespace."""
    return path.read_text(encoding="utf-8").strip()


def write_text(path: Path, content: str) -> Path:
    """
    Write rendered output as UTF-8, creating parent directories.

    Returns:
        The path written to
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
