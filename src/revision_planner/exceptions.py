"""Custom exceptions for the revision planner."""


class PlannerError(Exception):
    """Base exception for planner file errors."""

    pass


class PlannerFileError(PlannerError):
    """Planner file is missing, unreadable or not valid JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read planner file '{path}': {reason}")


class InvalidPlannerError(PlannerError):
    """Planner document has the wrong overall structure."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        location = f" in '{path}'" if path else ""
        super().__init__(f"Invalid planner{location}: {message}")
