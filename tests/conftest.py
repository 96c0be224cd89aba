"""
Shared pytest fixtures and configuration.
"""

import shutil
import tempfile
from pathlib import Path
from subprocess import CompletedProcess
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from pngshrink.core.config import ShrinkConfig
from pngshrink.core.tool_executor import ToolExecutor
from pngshrink.utils.logger import get_logger


def png_bytes(size: int, fill: bytes = b"P") -> bytes:
    """Build ``size`` bytes of fake PNG content."""
    return (fill * size)[:size]


def _tool_paths(args):
    """Extract (input, output) paths from a stage's argument list."""
    if "-out" in args:
        return Path(args[-1]), Path(args[args.index("-out") + 1])
    return Path(args[-2]), Path(args[-1])


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def sample_png(temp_dir):
    """Create a 10,000 byte PNG file."""
    image_path = temp_dir / "photo.png"
    image_path.write_bytes(png_bytes(10000, b"O"))
    return image_path


@pytest.fixture
def mock_config(sample_png):
    """Create a sample ShrinkConfig for in-place shrinking."""
    return ShrinkConfig(input_path=sample_png)


@pytest.fixture
def fake_tools(mocker):
    """
    Patch ToolExecutor inside the orchestrator with fakes.

    Set ``fake_tools.sizes[tool]`` to an int to make the tool write that many
    bytes, to an exception to make it fail, or leave it None to copy the input
    unchanged. Calls are recorded in ``fake_tools.calls`` as (tool, in, out).
    """
    state = SimpleNamespace(sizes={"pngcrush": None, "optipng": None}, executors={}, calls=[])

    def make_executor(tool_name, tool_path=None, timeout=None):
        executor = MagicMock(spec=ToolExecutor)
        executor.tool_name = tool_name
        executor.tool_path = tool_path or f"/fake/bin/{tool_name}"

        def run(args):
            in_path, out_path = _tool_paths(args)
            state.calls.append((tool_name, in_path, out_path))
            behaviour = state.sizes[tool_name]
            if isinstance(behaviour, BaseException):
                raise behaviour
            if behaviour is None:
                out_path.write_bytes(in_path.read_bytes())
            else:
                out_path.write_bytes(png_bytes(behaviour, tool_name[:1].encode()))
            return CompletedProcess([tool_name] + list(args), 0, "", "")

        executor.run.side_effect = run
        state.executors[tool_name] = executor
        return executor

    state.executor_class = mocker.patch("pngshrink.core.png_shrinker.ToolExecutor", side_effect=make_executor)
    return state


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach handlers bound to captured streams after each test."""
    yield
    get_logger().configure(enable_console=False)
