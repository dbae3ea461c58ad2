import logging
from typing import Any

from fastapi.responses import JSONResponse

from liftlog.actions.results import Reason

log = logging.getLogger("uvicorn")

STATUS_FOR = {
    Reason.validation: 422,
    Reason.unauthorized: 401,
    Reason.not_found: 404,
    Reason.error: 500,
}

class ViewInvalidations:
    """Per-request revalidate callback; the views end up in the X-Revalidate header."""
    def __init__(self):
        self.views: list[str] = []

    def __call__(self, view: str) -> None:
        if view not in self.views:
            log.debug("revalidate %s", view)
            self.views.append(view)

def get_invalidations() -> ViewInvalidations:
    return ViewInvalidations()

def respond(result, invalidations: ViewInvalidations, *, created: bool = False) -> JSONResponse:
    if result.success:
        status_code = 201 if created else 200
    else:
        status_code = STATUS_FOR[result.reason]
    response = JSONResponse(
        status_code=status_code,
        content=result.model_dump(mode="json", exclude_none=True),
    )
    if invalidations.views:
        response.headers["X-Revalidate"] = ",".join(invalidations.views)
    return response

def form_data(payload: Any, **path: str) -> Any:
    """Body fields plus path ids. A body that is not a JSON object is passed on
    untouched so the action reports it like any other invalid form."""
    if payload is None:
        return dict(path)
    if isinstance(payload, dict):
        return {**payload, **path}
    return payload
