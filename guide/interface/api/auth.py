"""Viewer resolution for API routes.

The authenticated viewer comes from a JWT, read from the ``auth_token``
cookie or an ``Authorization: Bearer`` header. Routes only ever see the
viewer's user ID; the use cases resolve it to a User.
"""

from typing import Annotated

from fastapi import Cookie, Depends, Header, Request

from guide.domain.service import JWTService
from guide.interface.error import AuthenticationRequiredError
from guide.util.jwt import JWTError


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_viewer_id(
    request: Request,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str:
    """Resolve the authenticated viewer's user ID.

    The cookie wins when both are present.

    Raises:
        AuthenticationRequiredError: If no token is supplied or it is invalid
    """
    token = auth_token or _bearer_token(authorization)
    if not token:
        raise AuthenticationRequiredError()

    jwt_service = await request.state.dishka_container.get(JWTService)
    try:
        payload = jwt_service.verify_token(token)
    except JWTError:
        raise AuthenticationRequiredError("Invalid or expired token")

    return str(payload.user_id)


ViewerId = Annotated[str, Depends(get_viewer_id)]
