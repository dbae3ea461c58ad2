from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from liftlog import actions
from liftlog.db import get_db
from liftlog.deps.auth import get_optional_user_id
from liftlog.routers._respond import ViewInvalidations, form_data, get_invalidations, respond

router = APIRouter(prefix="/sets", tags=["sets"])

@router.patch("/{set_id}")
def update_set(
    set_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    data = form_data(payload, set_id=set_id)
    result = actions.update_set(db, user_id, data, invalidations)
    return respond(result, invalidations)

@router.delete("/{set_id}")
def delete_set(
    set_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    result = actions.delete_set(db, user_id, {"set_id": set_id}, invalidations)
    return respond(result, invalidations)
