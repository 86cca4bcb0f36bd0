from pathlib import Path

from .default_rules import PROPERTY_LINE_TEMPLATE
from .errors import DirectoryReadError

def ensure_dir(path: Path) -> Path:
    """Return a resolved Path and make sure it is an existing directory."""
    try:
        p = Path(path).expanduser().resolve()
        exists = p.exists()
        is_dir = exists and p.is_dir()
    except OSError as e:
        raise DirectoryReadError(f"Cannot access directory {path}: {e}") from e
    if not exists:
        raise DirectoryReadError(f"Directory does not exist: {p}")
    if not is_dir:
        raise DirectoryReadError(f"Not a directory: {p}")
    return p


def property_line(folder_name: str, file_name: str) -> str:
    """CMake line registering ``folder_name/file_name`` as a test that passes on any output."""
    return PROPERTY_LINE_TEMPLATE.format(folder=folder_name, name=file_name)
