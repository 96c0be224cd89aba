import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pngshrink import __version__
from pngshrink.core.config import ParameterValidator, ShrinkConfig
from pngshrink.core.errors import StageError
from pngshrink.core.png_shrinker import PngShrinker
from pngshrink.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngshrink",
        description="Losslessly shrink a PNG file with pngcrush and optipng, keeping the smallest result.",
    )
    parser.add_argument("input", type=Path, help="Input file")
    parser.add_argument("-o", "--out", type=Path, default=None, help="Output file (don't overwrite input)")
    parser.add_argument("--dry", action="store_true", help="Dry-run: report savings, leave the input untouched")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print per-stage size statistics")

    tools = parser.add_argument_group("external tools")
    tools.add_argument("--pngcrush-path", default=None, help="Path to pngcrush (default: search PATH)")
    tools.add_argument("--optipng-path", default=None, help="Path to optipng (default: search PATH)")
    tools.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each tool before aborting (default: no limit)",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=ParameterValidator.VALID_LOG_LEVELS,
        help="Diagnostic output level on stderr (default: WARNING)",
    )
    logging_group.add_argument("--log-file", type=Path, default=None, help="Also write diagnostics to this file")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ShrinkConfig:
    return ShrinkConfig(
        input_path=args.input,
        output_path=args.out,
        verbose=args.verbose,
        dry_run=args.dry,
        pngcrush_path=args.pngcrush_path,
        optipng_path=args.optipng_path,
        timeout=args.timeout,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    logger = get_logger()
    logger.configure(log_level=config.log_level, log_file=config.log_file)

    try:
        shrinker = PngShrinker(config)
        shrinker.shrink()
    except (FileNotFoundError, ValueError, StageError, OSError) as error:
        logger.error(str(error))
        logger.debug("Details:", exc_info=True)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
