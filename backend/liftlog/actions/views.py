"""Names of the cached views an action can make stale.

After a successful write an action calls ``revalidate(view)`` once per view it
touched. What "revalidating" means is up to the caller (the HTTP layer
reports them in a response header).
"""
import uuid
from datetime import datetime
from typing import Callable

from liftlog.dates import format_local_date

Revalidate = Callable[[str], None]

DASHBOARD = "/dashboard"


def workout_view(workout_id: uuid.UUID) -> str:
    return f"/dashboard/workout/{workout_id}"


def dashboard_for(day: datetime) -> str:
    return f"{DASHBOARD}?date={format_local_date(day)}"


def no_revalidate(view: str) -> None:
    return None
