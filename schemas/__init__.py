"""
Request payload schemas
"""

from flask import abort, request
from pydantic import ValidationError


def validation_details(exc: ValidationError) -> list:
    """Compact, JSON-safe view of a pydantic error for API responses."""
    return [
        {"field": ".".join(str(p) for p in err["loc"]) or "body", "message": err["msg"]}
        for err in exc.errors()
    ]


def parse_body(schema):
    """Validate the JSON body of the current request against *schema* or abort 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, "Request body must be a JSON object")
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        abort(400, description={"message": "Invalid request body",
                                "errors": validation_details(exc)})
