import os
from typing import Iterable, List

from ..schemas import ExtensionConfig

def scan_directory(root: str) -> List[str]:
    """Depth-first list of every regular file under ``root``, in listing order.

    Symlinks are classified without being followed, so they are neither
    descended into nor returned. Raises ``OSError`` if ``root`` cannot be listed.
    """
    files: List[str] = []
    with os.scandir(root) as it:
        entries = list(it)
    for entry in entries:
        path = os.path.join(root, entry.name)
        if entry.is_dir(follow_symlinks=False):
            files.extend(scan_directory(path))
        elif entry.is_file(follow_symlinks=False):
            files.append(path)
    return files

def filter_candidates(files: Iterable[str], config: ExtensionConfig) -> List[str]:
    return [p for p in files if config.accepts(p)]

def read_file_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()

def display_name(name: str) -> str:
    """Printable form of a path; undecodable filename bytes show as escapes."""
    return name.encode("utf-8", "backslashreplace").decode("utf-8")
