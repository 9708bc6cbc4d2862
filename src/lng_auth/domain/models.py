"""Auth domain models: pure dataclasses."""

from dataclasses import dataclass

from src.lng_common.enums import RoleKey


@dataclass(frozen=True)
class AuthUser:
    id: str
    phone: str
    password_hash: str  # bcrypt, see lng_auth.auth.password
    contact_name: str
    organization_name: str
    role: RoleKey
    customer_id: str | None = None  # terminal users only


@dataclass(frozen=True)
class LoginInput:
    phone: str
    password: str
    verify_code: str


@dataclass(frozen=True)
class RegisterInput:
    organization_name: str
    contact_name: str
    phone: str
    password: str
    role: RoleKey
    verify_code: str


@dataclass(frozen=True)
class ResetPasswordInput:
    phone: str
    verify_code: str
    new_password: str
