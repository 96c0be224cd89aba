from pathlib import Path
from typing import List

from pngshrink.core.tool_executor import ToolExecutor
from pngshrink.utils.logger import get_logger


# ============================================================================
# Compression Stages
# ============================================================================


class Stage:
    """One external compressor invocation, reading ``in_path`` and writing ``out_path``."""

    tool_name = ""

    def __init__(self, executor: ToolExecutor):
        """
        Initialize stage.

        Args:
            executor: Executor bound to this stage's tool
        """
        self.executor = executor
        self.logger = get_logger()

    @property
    def name(self) -> str:
        return self.tool_name

    def compress(self, in_path: Path, out_path: Path) -> None:
        """
        Run the stage's tool, leaving ``in_path`` untouched.

        Args:
            in_path: Path to the current-best PNG file
            out_path: Free path the tool writes its result to
        """
        args = self.build_args(in_path, out_path)
        self.logger.debug(f"{self.name} args for {in_path.name}: {' '.join(args)}")
        self.executor.run(args)

    def build_args(self, in_path: Path, out_path: Path) -> List[str]:
        raise NotImplementedError


class PngcrushStage(Stage):
    """Brute-force recompression that strips all ancillary chunks."""

    tool_name = "pngcrush"

    def build_args(self, in_path: Path, out_path: Path) -> List[str]:
        # -s: silent, -brute: try every filter/zlib combination, -rem alla: drop ancillary chunks except alpha
        return ["-s", "-brute", "-rem", "alla", str(in_path), str(out_path)]


class OptipngStage(Stage):
    """Highest-effort optipng pass."""

    tool_name = "optipng"

    def build_args(self, in_path: Path, out_path: Path) -> List[str]:
        return ["-quiet", "-o7", "-out", str(out_path), str(in_path)]
