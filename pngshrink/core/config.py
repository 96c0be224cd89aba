from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# ============================================================================
# Configuration Classes
# ============================================================================


@dataclass(frozen=True)
class ShrinkConfig:
    """Configuration for a single pngshrink run, built once at startup."""

    input_path: Path
    output_path: Optional[Path] = None
    verbose: bool = False
    dry_run: bool = False
    pngcrush_path: Optional[str] = None
    optipng_path: Optional[str] = None
    timeout: Optional[float] = None
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


# ============================================================================
# Parameter Validator
# ============================================================================


class ParameterValidator:
    """Validates run parameters before any external tool is started."""

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "NOTICE", "WARNING", "ERROR", "CRITICAL"]

    @staticmethod
    def validate(config: ShrinkConfig) -> None:
        """Validate all parameters in the configuration."""
        ParameterValidator.validate_input_path(config.input_path)
        ParameterValidator.validate_output_path(config.output_path, config.input_path)
        ParameterValidator.validate_timeout(config.timeout)
        ParameterValidator.validate_log_level(config.log_level)

    @staticmethod
    def validate_input_path(input_path: Path) -> None:
        """Validate that the input file exists and is a regular file."""
        if not input_path.exists():
            raise FileNotFoundError(f"File {input_path} not found")
        if not input_path.is_file():
            raise ValueError(f"Input path is not a file: {input_path}")

    @staticmethod
    def validate_output_path(output_path: Optional[Path], input_path: Path) -> None:
        """Validate explicit output path configuration."""
        if output_path is None:
            return
        if output_path.exists() and output_path.is_dir():
            raise ValueError(f"Output path is a directory: {output_path}")
        if output_path.resolve() == input_path.resolve():
            raise ValueError("output_path cannot be the same as input_path; omit --out to overwrite in place")
        if not output_path.resolve().parent.is_dir():
            raise ValueError(f"Output directory does not exist: {output_path.parent}")

    @staticmethod
    def validate_timeout(timeout: Optional[float]) -> None:
        """Validate tool timeout value."""
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

    @staticmethod
    def validate_log_level(log_level: str) -> None:
        """Validate log level name."""
        if log_level.upper() not in ParameterValidator.VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {ParameterValidator.VALID_LOG_LEVELS}, got {log_level}")
