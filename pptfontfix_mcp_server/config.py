"""
Configuration for the PPT Font Fix MCP server.
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "PPTFONTFIX_"


@dataclass
class Settings:
    """Server settings, read from PPTFONTFIX_* environment variables."""

    # Directory searched for relative input paths (e.g. a mounted volume)
    input_dir: Optional[Path] = None
    # Default directory for saved files when a tool call gives none
    output_dir: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.output_dir is None:
            self.output_dir = Path(tempfile.gettempdir()) / "pptfontfix"
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        input_dir = os.getenv(f"{ENV_PREFIX}INPUT_DIR")
        output_dir = os.getenv(f"{ENV_PREFIX}OUTPUT_DIR")
        return cls(
            input_dir=Path(input_dir) if input_dir else None,
            output_dir=Path(output_dir) if output_dir else None,
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
        )
