from pydantic import BaseModel

from livefit.schemas.fields import RequiredStr


class SignupRequest(BaseModel):
    name: RequiredStr
    email: RequiredStr
    password: RequiredStr


class LoginRequest(BaseModel):
    email: RequiredStr
    password: RequiredStr


class ProfileUpdate(BaseModel):
    name: RequiredStr
