"""Mutation layer: validate -> require identity -> delegate -> revalidate views."""
from liftlog.actions.exercises import (
    add_exercise_to_workout,
    create_exercise,
    remove_exercise_from_workout,
)
from liftlog.actions.sets import add_set, delete_set, update_set
from liftlog.actions.workouts import create_workout, update_workout

__all__ = [
    "create_workout",
    "update_workout",
    "create_exercise",
    "add_exercise_to_workout",
    "remove_exercise_from_workout",
    "add_set",
    "update_set",
    "delete_set",
]
