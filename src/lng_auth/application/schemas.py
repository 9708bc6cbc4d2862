"""Pydantic schemas for lng_auth API."""

from pydantic import BaseModel, Field

from src.lng_auth.domain.models import AuthUser, LoginInput, RegisterInput, ResetPasswordInput
from src.lng_common.enums import RoleKey
from src.lng_store.state import AppState

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    phone: str = Field(..., max_length=20)
    password: str = Field(..., max_length=128)
    verify_code: str = Field(..., max_length=12)

    def to_input(self) -> LoginInput:
        return LoginInput(phone=self.phone, password=self.password, verify_code=self.verify_code)


class RegisterRequest(BaseModel):
    organization_name: str = Field(..., max_length=128)
    contact_name: str = Field(..., max_length=64)
    phone: str = Field(..., max_length=20)
    password: str = Field(..., max_length=128)
    role: RoleKey = RoleKey.TERMINAL
    verify_code: str = Field(..., max_length=12)

    def to_input(self) -> RegisterInput:
        return RegisterInput(
            organization_name=self.organization_name,
            contact_name=self.contact_name,
            phone=self.phone,
            password=self.password,
            role=self.role,
            verify_code=self.verify_code,
        )


class ResetPasswordRequest(BaseModel):
    phone: str = Field(..., max_length=20)
    verify_code: str = Field(..., max_length=12)
    new_password: str = Field(..., max_length=128)

    def to_input(self) -> ResetPasswordInput:
        return ResetPasswordInput(phone=self.phone, verify_code=self.verify_code, new_password=self.new_password)


class SwitchRoleRequest(BaseModel):
    role: RoleKey


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    """Never carries the password hash."""

    id: str
    phone: str
    contact_name: str
    organization_name: str
    role: RoleKey
    customer_id: str | None

    @classmethod
    def from_domain(cls, user: AuthUser) -> "UserResponse":
        return cls(
            id=user.id,
            phone=user.phone,
            contact_name=user.contact_name,
            organization_name=user.organization_name,
            role=user.role,
            customer_id=user.customer_id,
        )


class SessionResponse(BaseModel):
    is_authenticated: bool
    current_role: RoleKey
    active_customer_id: str
    active_customer_name: str
    current_user: UserResponse | None

    @classmethod
    def from_state(cls, state: AppState) -> "SessionResponse":
        return cls(
            is_authenticated=state.is_authenticated,
            current_role=state.current_role,
            active_customer_id=state.active_customer_id,
            active_customer_name=state.active_customer_name,
            current_user=UserResponse.from_domain(state.current_user) if state.current_user else None,
        )
