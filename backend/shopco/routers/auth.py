"""
shopco/routers/auth.py - Register / login with e-mail + password.

Accounts live in the `users` collection. Login is a one-shot credential check:
no token or server-side session is issued.
"""
from fastapi import APIRouter, Depends

from shopco.config import get_db
from shopco.core.passwords import PasswordHasher, get_password_hasher
from shopco.schemas.user import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserOut
from shopco.services import auth as svc

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse)
def register(
    payload: RegisterRequest,
    db=Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    user_id = svc.register(db, hasher, payload.email, payload.password, payload.name)
    return RegisterResponse(message="User registered successfully", userId=user_id)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db=Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    user = svc.login(db, hasher, payload.email, payload.password)
    return LoginResponse(message="Login successful", user=UserOut(**user))
