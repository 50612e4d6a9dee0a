from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.auth.gate import AuthError, AuthGate
from backend.core import config

security = HTTPBearer(auto_error=False)


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth_gate


def get_current_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    gate: AuthGate = Depends(get_auth_gate),
) -> str:
    token = request.cookies.get(config.TOKEN_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials

    try:
        return gate.verify(token)
    except AuthError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
