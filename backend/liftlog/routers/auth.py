from fastapi import APIRouter, Depends
from liftlog.deps.auth import get_current_user_id

router = APIRouter(prefix="/auth", tags=["auth"])

@router.get("/me")
def me(user_id: str = Depends(get_current_user_id)):
    return {"user_id": user_id}
