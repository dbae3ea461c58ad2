from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

M = TypeVar("M", bound=BaseModel)

FORM = "form"  # key for errors not tied to a single field


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Map each field to the message of the first rule it broke."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else FORM
        errors.setdefault(field, err["msg"])
    return errors


def first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else "Validation failed"


def parse(model: Type[M], data: Any) -> M:
    """Validate untrusted input; raises ValidationError."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        # reported under FORM, like any other error without a field
        raise ValidationError.from_exception_data(
            model.__name__,
            [{
                "type": PydanticCustomError("invalid_form", "Invalid form data"),
                "loc": (),
                "input": data,
            }],
        )
    return model.model_validate(dict(data))
