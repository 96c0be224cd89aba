import os
import shutil
import subprocess  # nosec B404
import sys
from pathlib import Path
from typing import List, Optional

from pngshrink.core.errors import ToolNotFoundError
from pngshrink.utils.logger import get_logger


# ============================================================================
# Tool Executor
# ============================================================================


class ToolExecutor:
    """Locates an external compressor and runs it to completion."""

    def __init__(self, tool_name: str, tool_path: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize tool executor.

        Args:
            tool_name: Logical name of the executable (e.g. "optipng")
            tool_path: Explicit path to the executable. If None, it is searched on PATH.
            timeout: Seconds to wait for the tool before giving up. None waits forever.
        """
        self.tool_name = tool_name
        self.timeout = timeout
        self.logger = get_logger()

        if tool_path is not None:
            if not Path(tool_path).is_file():
                raise ToolNotFoundError(tool_name, f"{tool_name} not found at {tool_path}")
            self.tool_path = str(tool_path)
        else:
            self.tool_path = self.find_tool(tool_name)
            if self.tool_path is None:
                raise ToolNotFoundError(tool_name)

        self.logger.debug(f"Using {tool_name} at {self.tool_path}")

    @staticmethod
    def executable_name(tool_name: str, platform: Optional[str] = None) -> str:
        """Apply the platform's executable suffix to a tool name."""
        platform = platform or sys.platform
        if platform.startswith("win") and not tool_name.lower().endswith(".exe"):
            return tool_name + ".exe"
        return tool_name

    @staticmethod
    def find_tool(tool_name: str) -> Optional[str]:
        """Find an executable on PATH, returning its absolute path or None."""
        found = shutil.which(ToolExecutor.executable_name(tool_name))
        if found is None:
            return None
        return os.path.abspath(found)

    def run(self, args: List[str]) -> subprocess.CompletedProcess:
        """
        Run the tool and block until it exits.

        Output is captured rather than shown and only reaches the debug log.

        Args:
            args: Arguments passed after the executable path

        Returns:
            CompletedProcess from subprocess

        Raises:
            OSError: The process could not be started
            subprocess.TimeoutExpired: The tool ran longer than ``timeout``
            subprocess.CalledProcessError: The tool exited with a non-zero status
        """
        cmd = [self.tool_path] + [str(arg) for arg in args]
        self.logger.debug(f"Running: {' '.join(cmd)}")

        result = subprocess.run(  # nosec B603
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.timeout,
        )

        if result.stderr:
            self.logger.debug(f"{self.tool_name} stderr:\n{result.stderr.rstrip()}")

        self._raise_on_error(result, cmd)
        return result

    @staticmethod
    def _raise_on_error(result: subprocess.CompletedProcess, cmd: List[str]) -> None:
        if result.returncode != 0:
            raise subprocess.CalledProcessError(result.returncode, cmd, result.stdout, result.stderr)
