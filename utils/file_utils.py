"""
File Utilities Module
Locating and reading pattern definition files on disk.
"""

import json
from pathlib import Path
from typing import Any, List

PATTERN_FILE_EXTENSION = '.json'


def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    return path.name.startswith('.')


def list_pattern_files(directory: str | Path) -> List[Path]:
    """
    Collect the pattern files of a directory.

    Only the top level is scanned. Files are returned sorted by name so
    that category load order, and therefore override order, is stable.

    Raises:
        FileNotFoundError: If the directory doesn't exist
    """
    base_path = normalize_path(directory)
    if not base_path.is_dir():
        raise FileNotFoundError(f"Pattern directory not found: {base_path}")
    return sorted(
        (entry for entry in base_path.iterdir()
         if entry.is_file() and not is_hidden(entry)
         and entry.suffix.lower() == PATTERN_FILE_EXTENSION),
        key=lambda entry: entry.name,
    )


def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()


def read_json_file(file_path: Path, object_pairs_hook=None) -> Any:
    return json.loads(read_file_content(file_path), object_pairs_hook=object_pairs_hook)
