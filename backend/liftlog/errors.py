"""Domain errors raised by the repositories and actions."""


class NotFoundOrUnauthorized(LookupError):
    """The resource does not exist, or it belongs to someone else.

    Both cases share one error (and one message) so callers cannot probe for
    other users' rows.
    """

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message


class UnauthorizedError(Exception):
    """No authenticated user on a flow that requires one."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
        self.message = message


class ExerciseInUseError(Exception):
    """An exercise cannot be deleted while workouts still reference it."""

    def __init__(self, exercise_id):
        super().__init__(f"Exercise {exercise_id} is still used by a workout")
        self.exercise_id = exercise_id
