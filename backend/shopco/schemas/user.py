"""
shopco/schemas/user.py - Request/response models for registration and login.

Emails are plain strings: matching is exact and case-sensitive, so no
normalisation (EmailStr) is applied.
"""
from typing import Optional
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str = Field(..., description="E-mail (unique, case-sensitive)")
    password: str = Field(..., description="Password")
    name: Optional[str] = Field(None, description="Display name")


class LoginRequest(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str] = None


class RegisterResponse(BaseModel):
    success: bool = True
    message: str
    userId: str


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    user: UserOut


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str
