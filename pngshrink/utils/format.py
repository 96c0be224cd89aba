# ============================================================================
# Utility Functions
# ============================================================================


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable size."""
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if abs(size_bytes) < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} PB"


def shrink_percentage(size_before: int, size_after: int) -> float:
    """
    Percentage by which a file shrank.

    Negative when the file grew. An empty source yields 0.0 rather than
    dividing by zero.
    """
    if size_before <= 0:
        return 0.0
    return 100.0 * (1 - size_after / size_before)


def format_shrink_line(label: str, size_before: int, size_after: int) -> str:
    """
    Format a size comparison line.

    Example:
        >>> format_shrink_line("pngcrush", 10000, 9000)
        'pngcrush: 10000 -> 9000 (shrunk by 1000 bytes, 10.0%)'
    """
    delta = size_before - size_after
    percentage = shrink_percentage(size_before, size_after)
    return f"{label}: {size_before} -> {size_after} (shrunk by {delta} bytes, {percentage:.1f}%)"
