import uuid

from liftlog.security import create_access_token


def new_user_id() -> str:
    return f"user_{uuid.uuid4().hex[:12]}"


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}
