"""
pngshrink - Lossless PNG shrinking through pngcrush and optipng.
"""

__version__ = "0.1.0"

# Package-level exports for convenience
from pngshrink.cli import main
from pngshrink.core.config import ParameterValidator, ShrinkConfig
from pngshrink.core.errors import StageError, ToolNotFoundError
from pngshrink.core.png_shrinker import PngShrinker, ShrinkResult, StageResult, StageStatus
from pngshrink.core.stages import OptipngStage, PngcrushStage, Stage
from pngshrink.core.tool_executor import ToolExecutor
from pngshrink.utils.file_processor import FileProcessor
from pngshrink.utils.format import format_shrink_line, format_size, shrink_percentage


__all__ = [
    "ShrinkConfig",
    "ParameterValidator",
    "PngShrinker",
    "ShrinkResult",
    "StageResult",
    "StageStatus",
    "Stage",
    "PngcrushStage",
    "OptipngStage",
    "ToolExecutor",
    "StageError",
    "ToolNotFoundError",
    "FileProcessor",
    "format_size",
    "format_shrink_line",
    "shrink_percentage",
    "main",
]
