import subprocess  # nosec B404
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pngshrink.core.config import ParameterValidator, ShrinkConfig
from pngshrink.core.errors import StageError
from pngshrink.core.stages import OptipngStage, PngcrushStage, Stage
from pngshrink.core.tool_executor import ToolExecutor
from pngshrink.utils.file_processor import FileProcessor
from pngshrink.utils.format import format_shrink_line, format_size, shrink_percentage
from pngshrink.utils.logger import get_logger


# ============================================================================
# Results
# ============================================================================


class StageStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMMITTED = "committed"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass
class StageResult:
    """Outcome of one stage."""

    stage: str
    size_before: int = 0
    size_after: int = 0
    status: StageStatus = StageStatus.PENDING

    @property
    def delta(self) -> int:
        return self.size_before - self.size_after

    @property
    def percentage(self) -> float:
        return shrink_percentage(self.size_before, self.size_after)


@dataclass
class ShrinkResult:
    """Outcome of a whole run."""

    input_path: Path
    final_path: Path
    original_size: int
    final_size: int
    dry_run: bool = False
    stages: List[StageResult] = field(default_factory=list)

    @property
    def saved(self) -> int:
        return self.original_size - self.final_size

    @property
    def percentage(self) -> float:
        return shrink_percentage(self.original_size, self.final_size)


# ============================================================================
# PNG Shrinker
# ============================================================================


class PngShrinker:
    """Runs pngcrush then optipng over one PNG, keeping whichever output is smallest."""

    def __init__(self, config: ShrinkConfig):
        """
        Validate the configuration and resolve both external tools.

        Args:
            config: Run configuration

        Raises:
            FileNotFoundError: Input file or an external tool is missing
            ValueError: Invalid configuration
        """
        ParameterValidator.validate(config)

        self.config = config
        self.logger = get_logger()
        self.file_processor = FileProcessor()

        pngcrush = ToolExecutor(PngcrushStage.tool_name, config.pngcrush_path, config.timeout)
        optipng = ToolExecutor(OptipngStage.tool_name, config.optipng_path, config.timeout)
        # Order matters: optipng does best on pngcrush's output
        self.stages: List[Stage] = [PngcrushStage(pngcrush), OptipngStage(optipng)]

        # Committed stage output owned by this run; None while the input is still the current best
        self._working: Optional[Path] = None

    def shrink(self) -> ShrinkResult:
        """
        Execute both stages and finalize the result.

        Returns:
            ShrinkResult describing sizes and per-stage outcomes

        Raises:
            StageError: A stage failed; no staged files are left behind
            OSError: Moving the final result into place failed
        """
        input_path = self.config.input_path
        original_size = self.file_processor.file_size(input_path)
        self.logger.info(f"Shrinking {input_path} ({format_size(original_size)})")

        results: List[StageResult] = []
        self._working = None
        try:
            for stage in self.stages:
                results.append(self.run_stage(stage, self._current_best()))

            final_size = self.file_processor.file_size(self._current_best())
            print(format_shrink_line(str(input_path), original_size, final_size))
            final_path = self._finalize()
        except BaseException:
            self._discard_working()
            raise

        return ShrinkResult(
            input_path=input_path,
            final_path=final_path,
            original_size=original_size,
            final_size=final_size,
            dry_run=self.config.dry_run,
            stages=results,
        )

    def run_stage(self, stage: Stage, current: Path) -> StageResult:
        """
        Run one stage against the current-best file and keep or discard its output.

        A candidate no larger than ``current`` is committed; a larger one is
        deleted and ``current`` stays the best file.

        Args:
            stage: Stage to run
            current: Current-best file

        Returns:
            StageResult with status COMMITTED or REJECTED
        """
        result = StageResult(stage=stage.name)
        candidate = self.file_processor.find_free_name(self.config.input_path)

        try:
            result.size_before = self.file_processor.file_size(current)
            result.status = StageStatus.RUNNING
            self.logger.debug(f"{stage.name}: {current} -> {candidate}")
            stage.compress(current, candidate)
            result.size_after = self.file_processor.file_size(candidate)
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as error:
            result.status = StageStatus.FAILED
            self.file_processor.discard(candidate)
            raise StageError(stage.name, self.config.input_path, error) from error
        except BaseException:
            result.status = StageStatus.FAILED
            self.file_processor.discard(candidate)
            raise

        if self.config.verbose:
            print(format_shrink_line(stage.name, result.size_before, result.size_after))

        if result.delta >= 0:
            try:
                self._promote(candidate)
            except OSError as error:
                result.status = StageStatus.FAILED
                self.file_processor.discard(candidate)
                raise StageError(stage.name, self.config.input_path, error) from error
            result.status = StageStatus.COMMITTED
            self.logger.notice(f"{stage.name}: kept result, saved {format_size(result.delta)}")
        else:
            self.file_processor.discard(candidate)
            result.status = StageStatus.REJECTED
            self.logger.notice(f"{stage.name}: discarded result, {format_size(-result.delta)} larger")

        return result

    def _current_best(self) -> Path:
        return self._working if self._working is not None else self.config.input_path

    def _promote(self, candidate: Path) -> None:
        # The input itself is only replaced during finalization
        if self._working is None:
            self._working = candidate
        else:
            self.file_processor.commit(candidate, self._working)

    def _finalize(self) -> Path:
        """Move the best result to its final location and return that location."""
        input_path = self.config.input_path
        output_path = self.config.output_path

        if self.config.dry_run:
            self._discard_working()
            self.logger.info("Dry run, discarding results")
            return input_path

        if output_path is not None:
            print(f"Writing to {output_path}")
            if self._working is None:
                self.file_processor.copy_to(input_path, output_path)
            else:
                self.file_processor.move_to(self._working, output_path)
                self._working = None
            return output_path

        if self._working is not None:
            self.file_processor.commit(self._working, input_path)
            self._working = None
        return input_path

    def _discard_working(self) -> None:
        if self._working is not None:
            self.file_processor.discard(self._working)
            self._working = None
