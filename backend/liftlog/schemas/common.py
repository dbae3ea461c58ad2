"""Reusable field rules for the input schemas.

Rules raise PydanticCustomError so the message a user sees is the one written
here, not pydantic's generic wording.
"""
import uuid
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic_core import PydanticCustomError

from liftlog.dates import local_tz, parse_local_date, to_utc

NAME_MAX_LENGTH = 100
MAX_REPS = 999
MAX_WEIGHT = Decimal("9999.99")

def _name_rule(label: str):
    def check(v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required", f"{label} name is required")
        if not isinstance(v, str):
            raise PydanticCustomError("string_type", f"{label} name must be text")
        v = v.strip()
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "too_long", f"{label} name must be {NAME_MAX_LENGTH} characters or less"
            )
        return v
    return BeforeValidator(check)

def _id_rule(label: str):
    def check(v):
        if isinstance(v, uuid.UUID):
            return v
        try:
            return uuid.UUID(str(v))
        except (TypeError, ValueError):
            raise PydanticCustomError("invalid_id", f"Invalid {label} ID")
    return BeforeValidator(check)

def _parse_started_at(v):
    if isinstance(v, datetime):
        return v
    if isinstance(v, date):
        return datetime.combine(v, time.min)
    if isinstance(v, str):
        v = v.strip()
        try:
            return datetime.combine(parse_local_date(v), time.min)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            pass
    return None

def _coerce_started_at(v):
    """
    Accepts a datetime, a date, ISO-8601 text or a local ``YYYY-MM-DD`` day
    and returns it as aware UTC.
    """
    if v is None or (isinstance(v, str) and not v.strip()):
        raise PydanticCustomError("required", "Start date is required")
    value = _parse_started_at(v)
    if value is None:
        raise PydanticCustomError("invalid_date", "Invalid date")
    try:
        value = to_utc(value)
        # must also be representable as a local day
        value.astimezone(local_tz())
    except (OverflowError, ValueError):
        raise PydanticCustomError("invalid_date", "Invalid date")
    return value

def _not_bool(label: str):
    # JSON true/false would otherwise pass as 1/0
    def check(v):
        if isinstance(v, bool):
            raise PydanticCustomError("number_type", f"{label} must be a number")
        return v
    return BeforeValidator(check)

def _two_places(v: Decimal) -> Decimal:
    return v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

WorkoutName = Annotated[str, _name_rule("Workout")]
ExerciseName = Annotated[str, _name_rule("Exercise")]

WorkoutId = Annotated[uuid.UUID, _id_rule("workout")]
ExerciseId = Annotated[uuid.UUID, _id_rule("exercise")]
WorkoutExerciseId = Annotated[uuid.UUID, _id_rule("workout exercise")]
SetId = Annotated[uuid.UUID, _id_rule("set")]

StartedAt = Annotated[datetime, BeforeValidator(_coerce_started_at)]

Reps = Annotated[int, Field(ge=0, le=MAX_REPS), _not_bool("Reps")]
Weight = Annotated[
    Decimal, Field(ge=0, le=MAX_WEIGHT), _not_bool("Weight"), AfterValidator(_two_places)
]

def drop_blank(data, keys):
    """
    Form inputs arrive as text: "" (or null) means "leave this field out",
    never "clear to zero".
    """
    if not isinstance(data, dict):
        return data
    return {
        k: v for k, v in data.items()
        if not (k in keys and (v is None or (isinstance(v, str) and not v.strip())))
    }
