from liftlog.models.exercise import Exercise
from liftlog.models.workout import Workout
from liftlog.models.workout_exercise import WorkoutExercise
from liftlog.models.exercise_set import ExerciseSet

__all__ = ["Exercise", "Workout", "WorkoutExercise", "ExerciseSet"]
