"""
Load and save presentations.
"""

import logging
import zipfile
from pathlib import Path
from typing import Any, Union

from lxml import etree
from pptx import Presentation
from pptx.exc import PackageNotFoundError

from .errors import PresentationLoadError

logger = logging.getLogger(__name__)


def load_presentation(pptx_path: Union[str, Path]) -> Any:
    """Open a .pptx file with python-pptx.

    Raises:
        FileNotFoundError: If the path does not exist
        PresentationLoadError: If the file is not a readable deck
    """
    pptx_path = Path(pptx_path)
    if not pptx_path.is_file():
        raise FileNotFoundError(f"PPT file does not exist: {pptx_path}")

    try:
        return Presentation(str(pptx_path))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, etree.XMLSyntaxError) as e:
        logger.error("Failed to open PPT file: %s", pptx_path)
        raise PresentationLoadError(f"Cannot load presentation {pptx_path}: {e}") from e


def save_presentation(prs: Any, output_path: Union[str, Path]) -> Path:
    """Write the presentation to output_path.

    The parent directory must exist. Write errors propagate as OSError and
    a partially written file is left in place.
    """
    output_path = Path(output_path)
    prs.save(str(output_path))
    logger.info("Presentation saved: %s", output_path)
    return output_path
