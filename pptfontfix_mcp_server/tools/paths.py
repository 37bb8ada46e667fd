"""
Map tool arguments to file-system paths.
"""

from pathlib import Path
from typing import Optional, Union

from .errors import ArgumentError

PPTX_SUFFIX = ".pptx"


def resolve_input_path(file_path: str, input_dir: Optional[Path] = None) -> Path:
    """Resolve a caller-supplied deck path.

    A path that does not exist as given is looked up by file name inside
    input_dir (e.g. a container volume the file was copied into).

    Raises:
        ArgumentError: If file_path is empty or not a .pptx file
        FileNotFoundError: If the file cannot be found
    """
    if not file_path or not file_path.strip():
        raise ArgumentError("file_path must not be empty")

    path = Path(file_path.strip()).expanduser()
    if path.suffix.lower() != PPTX_SUFFIX:
        raise ArgumentError("Input must be a PowerPoint file (.pptx)")

    if path.is_file():
        return path

    if input_dir is not None:
        candidate = Path(input_dir) / path.name
        if candidate.is_file():
            return candidate

    raise FileNotFoundError(f"PPT file does not exist: {file_path}")


def build_output_path(
    new_file_name: str,
    output_directory: Optional[Union[str, Path]],
    default_dir: Path,
) -> Path:
    """Build the save path without touching the file system.

    Only the file name part of new_file_name is used; a missing .pptx
    suffix is appended.
    """
    if not new_file_name or not new_file_name.strip():
        raise ArgumentError("new_file_name must not be empty")

    file_name = Path(new_file_name.strip()).name
    if Path(file_name).suffix.lower() != PPTX_SUFFIX:
        file_name += PPTX_SUFFIX

    directory = Path(output_directory).expanduser() if output_directory else Path(default_dir)
    return directory / file_name
