from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, field_validator

from backend.auth.dependencies import get_auth_gate, get_current_admin
from backend.auth.gate import AuthGate, InvalidCredentials
from backend.core import config

router = APIRouter(tags=['auth'])


class LoginRequest(BaseModel):
    user: str
    password: str

    @field_validator('user')
    @classmethod
    def validate_user(cls, value: str) -> str:
        if not value:
            raise ValueError('User is required')
        return value

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Password is required')
        return value


class SessionResponse(BaseModel):
    user: str
    message: str


@router.post('/login', response_model=SessionResponse)
def login(data: LoginRequest, gate: AuthGate = Depends(get_auth_gate)):
    try:
        user, token = gate.login(data.user, data.password)
    except InvalidCredentials as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    response = JSONResponse(content={'user': user, 'message': 'Login successful'})
    response.set_cookie(
        key=config.TOKEN_COOKIE_NAME,
        value=token,
        max_age=config.JWT_EXPIRES_MINUTES * 60,
        httponly=config.COOKIE_HTTPONLY,
        secure=config.COOKIE_SECURE,
        samesite=config.COOKIE_SAMESITE,
    )
    return response


@router.post('/logout', dependencies=[Depends(get_current_admin)])
def logout():
    response = Response(status_code=status.HTTP_200_OK)
    response.delete_cookie(
        key=config.TOKEN_COOKIE_NAME,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite=config.COOKIE_SAMESITE,
    )
    return response


@router.get('/verify', response_model=SessionResponse)
def verify(current_admin: str = Depends(get_current_admin)):
    return SessionResponse(user=current_admin, message='Token is valid')
