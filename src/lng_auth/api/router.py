"""lng_auth REST API: simulated login, registration and role switching."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.lng_auth.application.schemas import (
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    SessionResponse,
    SwitchRoleRequest,
)
from src.lng_common.errors import AuthenticationFailedError, ErrorDomain, raise_for_result
from src.lng_common.response import ApiResponse, respond
from src.lng_store.store import DomainStore, get_domain_store

router = APIRouter(prefix="/auth", tags=["auth"])

StoreDep = Annotated[DomainStore, Depends(get_domain_store)]


@router.post("/login")
async def login(body: LoginRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.login(body.to_input())
    if not result.success:
        raise AuthenticationFailedError(result.error or "登录失败")
    return respond(request, SessionResponse.from_state(store.state).model_dump())


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.register_account(body.to_input())
    raise_for_result(result, ErrorDomain.AUTH)
    return respond(request, {"id": result.entity_id})


@router.post("/reset-password")
async def reset_password(body: ResetPasswordRequest, store: StoreDep, request: Request) -> ApiResponse:
    result = store.reset_password(body.to_input())
    raise_for_result(result, ErrorDomain.AUTH)
    return respond(request, {"id": result.entity_id})


@router.post("/logout")
async def logout(store: StoreDep, request: Request) -> ApiResponse:
    store.logout()
    return respond(request, SessionResponse.from_state(store.state).model_dump())


@router.post("/switch-role")
async def switch_role(body: SwitchRoleRequest, store: StoreDep, request: Request) -> ApiResponse:
    store.switch_role(body.role)
    return respond(request, SessionResponse.from_state(store.state).model_dump())


@router.get("/session")
async def get_session(store: StoreDep, request: Request) -> ApiResponse:
    return respond(request, SessionResponse.from_state(store.state).model_dump())
