import logging
from typing import Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.actions.results import Failed, Reason
from liftlog.errors import NotFoundOrUnauthorized

log = logging.getLogger("uvicorn")

R = TypeVar("R")


def attempt(db: Session, verb: str, op: Callable[[], R]) -> R | Failed:
    """
    Run a repository call for a secondary action, turning expected failures
    into results. Anything that is not a store fault still propagates.
    """
    try:
        return op()
    except NotFoundOrUnauthorized as exc:
        return Failed(error=exc.message, reason=Reason.not_found)
    except SQLAlchemyError:
        db.rollback()
        log.exception("failed to %s", verb)
        return Failed(error=f"Failed to {verb}")
