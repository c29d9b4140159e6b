from typing import Iterable

from pydantic import ValidationError as SchemaError

from errors import ValidationError


def parse_body(model, payload, failure_message: str):
    """Validate a raw request body against `model`; schema failures become ValidationError."""
    try:
        return model.model_validate(payload if payload is not None else {})
    except SchemaError as e:
        raise ValidationError(failure_message, detail=str(e)) from e


def require_fields(data, fields: Iterable[str], failure_message: str):
    """Raise ValidationError when a field is missing or blank; the field name (by wire name) goes to the log."""
    for field in fields:
        value = getattr(data, field, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            alias = type(data).model_fields[field].alias or field
            raise ValidationError(failure_message, detail=f"{alias} is required")


def check_status(status, allowed: Iterable[str], failure_message: str) -> str:
    """Any member of the enum is accepted, from any current status."""
    allowed = tuple(allowed)
    if status not in allowed:
        raise ValidationError(
            failure_message,
            detail=f"Invalid status {status!r}. Must be one of: {', '.join(allowed)}"
        )
    return status
