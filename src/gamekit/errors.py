"""
Error types raised by the evaluators and the service layer.

Every error carries the HTTP status it maps to, so the app factory can
render it as ``{"error": message}`` without knowing the concrete type.
"""


class GameError(Exception):
    status_code: int = 400

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidGameData(GameError):
    """The game payload (create/update) breaks a template rule."""


class GridConflict(InvalidGameData):
    """Two crossword words put different letters in the same cell."""

    def __init__(self, row: int, col: int, existing: str, new: str):
        super().__init__(
            f"Grid Conflict at [Row {row}, Col {col}]. Words intersecting here "
            f"must share the same letter ('{existing}' vs '{new}')."
        )
        self.row = row
        self.col = col
        self.existing = existing
        self.new = new


class InvalidSubmission(GameError):
    """A check-answer request is structurally wrong."""


class HintLengthMismatch(InvalidSubmission):
    def __init__(self, question_id: str, expected: int, actual: int):
        super().__init__(f"Hint array length mismatch for question {question_id}")
        self.question_id = question_id
        self.expected = expected
        self.actual = actual


class InvalidElapsedTime(InvalidSubmission):
    def __init__(self, time_taken: float):
        super().__init__(f"time_taken must be greater than 0, got {time_taken}")
        self.time_taken = time_taken


class NotFound(GameError):
    status_code = 404


class Forbidden(GameError):
    status_code = 403


class Unauthorized(GameError):
    status_code = 401
