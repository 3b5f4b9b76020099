"""Request-scoped client identity.

Authentication happens upstream; by the time a request reaches the calorie
and entry routers the gateway has resolved the caller to a client id and
forwarded it in the ``X-Client-Id`` header.
"""

from fastapi import Header

from core.exceptions import ValidationError


def get_current_client_id(x_client_id: str = Header(None, alias="X-Client-Id")) -> int:
    """Return the authorized client id for the current request.

    Raises:
        ValidationError: If the header is absent or not an integer id.
    """
    if not x_client_id:
        raise ValidationError("X-Client-Id header is required", field="X-Client-Id")
    try:
        return int(x_client_id)
    except ValueError:
        raise ValidationError("X-Client-Id must be an integer client id", field="X-Client-Id")
