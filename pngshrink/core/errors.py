# ============================================================================
# Exceptions
# ============================================================================


class ToolNotFoundError(FileNotFoundError):
    """Raised when a required external executable cannot be located."""

    def __init__(self, tool_name: str, message: str = ""):
        self.tool_name = tool_name
        super().__init__(message or f"{tool_name} not found. Please install {tool_name} and add it to PATH.")


class StageError(RuntimeError):
    """Raised when a compression stage fails to produce a candidate."""

    def __init__(self, stage: str, input_path, cause: BaseException):
        self.stage = stage
        self.input_path = input_path
        self.cause = cause
        super().__init__(f"Error occurred with {stage} while processing {input_path}: {cause}")
