import os
import shutil
from pathlib import Path
from typing import Union

FILE_SCHEME = "file://"


def load_query_from_file(
    file_path: Union[str, os.PathLike],
    *,
    encoding: str = "utf-8",
    strip: bool = False
) -> str:
    """
    Load text content from a file.

    Raises:
        ValueError: If file_path is empty/whitespace.
        FileNotFoundError: If the file doesn't exist.
        IsADirectoryError: If the path is a directory.
        OSError: For other I/O errors (e.g., permission denied).
    """
    if not file_path or (isinstance(file_path, str) and not file_path.strip()):
        raise ValueError("File path cannot be empty or None")

    p = Path(file_path).expanduser()

    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")
    if p.is_dir():
        raise IsADirectoryError(f"Path is a directory, not a file: {p}")

    try:
        content = p.read_text(encoding=encoding)
    except OSError as e:
        raise OSError(f"Error reading file {p}: {e}") from e

    return content.strip() if strip else content


def clean_path(path: Union[str, os.PathLike]):
    """
    Delete all files and subdirectories in the given path, but keep the path itself.

    Args:
        path: The directory path to clean

    Raises:
        FileNotFoundError: If the path does not exist
        NotADirectoryError: If the path is not a directory
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise FileNotFoundError(f"Path does not exist: {path}")

    if not path_obj.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {path}")

    for item in path_obj.iterdir():
        if item.is_file() or item.is_symlink():
            item.unlink()
        elif item.is_dir():
            shutil.rmtree(item)


def local_path(uri: str) -> Path:
    """
    Turn a file:// URI (or a plain path) into a local Path.

    Other schemes (hdfs://, s3a://, ...) are not local and raise ValueError.
    """
    if uri.startswith(FILE_SCHEME):
        return Path(uri[len(FILE_SCHEME):])
    if "://" in uri:
        raise ValueError(f"Not a local path: {uri}")
    return Path(uri)
