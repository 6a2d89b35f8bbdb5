"""Typed exception hierarchy for ore."""


class OreError(Exception):
    """Base exception for all ore errors."""

    pass


class AnalysisError(OreError):
    """Raised when a directory or file cannot be analyzed."""

    pass


class PathNotFoundError(AnalysisError):
    """Raised when the requested path does not exist."""

    def __init__(self, path: str, kind: str = "Path"):
        self.path = path
        super().__init__(f"{kind} does not exist: {path}")


class WrongEntryTypeError(AnalysisError):
    """Raised when a directory was expected but a file was given, or vice versa."""

    def __init__(self, path: str, expected: str):
        self.path = path
        self.expected = expected
        super().__init__(f"Path is not a {expected}: {path}")


class SizeLimitExceededError(AnalysisError):
    """Raised when a file is larger than the allowed read ceiling."""

    def __init__(self, path: str, actual: int, maximum: int):
        self.path = path
        self.actual = actual
        self.maximum = maximum
        super().__init__(f"File too large: {actual} bytes (max: {maximum} bytes)")


class FileReadError(AnalysisError):
    """Raised when reading or decoding a file fails."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file: {path}: {reason}")


class FridaError(OreError):
    """Raised when a Frida script cannot be produced."""

    pass


class ScriptNotFoundError(FridaError):
    """Raised when a script name is not in the catalog."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"No Frida script named '{name}'. Available: {', '.join(available)}"
        )


class InvalidTargetError(FridaError):
    """Raised when a target function name has no identifier characters left."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Invalid function name provided: {target!r}")
