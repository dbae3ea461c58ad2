from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.repositories.workout_exercise_repo import WorkoutExerciseRepository
from liftlog.repositories.set_repo import SetRepository

__all__ = ["ExerciseRepository", "WorkoutRepository", "WorkoutExerciseRepository", "SetRepository"]
