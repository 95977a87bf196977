from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from samarthaa.app import App
from samarthaa.core.modules.auth.models import AuthToken
from samarthaa.errors import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_auth_token(
    app: Annotated[App, Depends(get_app)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> AuthToken:
    """Get and validate the access token from the Authorization Bearer header."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError

    auth_token = AuthToken(credentials.credentials)
    if not await app.is_auth_token_valid(auth_token):
        raise AuthenticationError("Invalid or expired token")
    return auth_token


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
