import errno
import shutil
from pathlib import Path
from typing import Union


# ============================================================================
# File Processor
# ============================================================================


class FileProcessor:
    """Handles staging paths, size measurement and safe file replacement."""

    @staticmethod
    def find_free_name(file_path: Union[str, Path]) -> Path:
        """
        Find the first path in the sequence ``name.ext``, ``name-01.ext``,
        ``name-02.ext``, ... that does not exist yet.

        The file is not created, so a concurrent process could still claim the
        returned name before it is used.

        Args:
            file_path: Candidate path

        Returns:
            Free path in the same directory as ``file_path``
        """
        file_path = Path(file_path)
        stem, suffix = file_path.stem, file_path.suffix

        candidate = file_path
        counter = 0
        while candidate.exists():
            counter += 1
            candidate = file_path.with_name(f"{stem}-{counter:02d}{suffix}")
        return candidate

    @staticmethod
    def file_size(file_path: Path) -> int:
        """Return the size of a file in bytes."""
        return file_path.stat().st_size

    @staticmethod
    def commit(candidate: Path, target: Path) -> None:
        """Atomically move ``candidate`` over ``target``, replacing it if present."""
        candidate.replace(target)

    @staticmethod
    def move_to(src: Path, dst: Path) -> None:
        """
        Move a file to a destination that may be on another filesystem.

        Same-filesystem moves are an atomic replace. Across devices the file is
        copied to ``dst`` and then removed from ``src``.
        """
        try:
            src.replace(dst)
        except OSError as error:
            if error.errno != errno.EXDEV:
                raise
            shutil.move(str(src), str(dst))

    @staticmethod
    def discard(file_path: Path) -> None:
        """Remove a staged file if it still exists."""
        if file_path.exists():
            file_path.unlink()

    @staticmethod
    def copy_to(src: Path, dst: Path) -> None:
        """Copy file contents and metadata from source to destination."""
        shutil.copy2(src, dst)
