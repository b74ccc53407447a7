"""
Helper Utilities Module.

Small, generic helpers shared by the pipeline stages and the CLI.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - format_sequence_path: Build a per-document path from a pattern
    - read_source_list: Load source locations from a text file
    - format_file_size: Human-readable byte counts for log lines
"""

from pathlib import Path
from typing import List, Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    This function creates the directory and all parent directories
    if they don't already exist. It's safe to call even if the
    directory already exists.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Raises:
        OSError: If the directory cannot be created.

    Example:
        >>> ensure_directory("outputs/reports")
        PosixPath('outputs/reports')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def format_sequence_path(
    directory: Union[str, Path],
    pattern: str,
    sequence_id: int
) -> Path:
    """
    Build the path of a per-document file from a filename pattern.

    Args:
        directory: Directory the file lives in.
        pattern: Filename pattern containing a ``{sequence_id}`` placeholder.
        sequence_id: 1-based sequence id of the source document.

    Returns:
        Path of the file.

    Example:
        >>> format_sequence_path("downloads", "file_{sequence_id}.pdf", 3)
        PosixPath('downloads/file_3.pdf')
    """
    return Path(directory) / pattern.format(sequence_id=sequence_id)


def read_source_list(filepath: Union[str, Path]) -> List[str]:
    """
    Read source locations from a text file, one per line.

    Blank lines and lines starting with ``#`` are ignored. Order is kept
    and duplicates are not removed.

    Args:
        filepath: Path to the text file.

    Returns:
        List of source locations.
    """
    sources = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                sources.append(line)
    return sources


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Example:
        >>> format_file_size(1536)
        "1.5 KB"
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
