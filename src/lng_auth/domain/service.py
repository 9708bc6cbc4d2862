"""Auth transitions: login, register, reset password, logout, role switch.

Identity checks are simulated: the SMS code is the fixed value from
settings.MOCK_VERIFY_CODE. Each failure returns exactly one message.
"""

from dataclasses import replace

from config.settings import settings
from src.lng_auth.auth.password import hash_password, verify_password
from src.lng_auth.domain.models import AuthUser, LoginInput, RegisterInput, ResetPasswordInput
from src.lng_common.enums import RoleKey
from src.lng_common.records import prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_store.state import AppState, StoreContext, Transition

_BAD_CODE = "验证码错误，请输入 {code}（Mock）"


def _find_by_phone(state: AppState, phone: str) -> AuthUser | None:
    return next((user for user in state.auth_users if user.phone == phone), None)


def _code_matches(code: str) -> bool:
    return code.strip() == settings.MOCK_VERIFY_CODE


def login(state: AppState, ctx: StoreContext, data: LoginInput) -> Transition:
    phone = data.phone.strip()
    if not phone:
        return state, ActionResult.invalid(["请输入手机号"])
    if not data.password.strip():
        return state, ActionResult.invalid(["请输入密码"])
    if not _code_matches(data.verify_code):
        return state, ActionResult.invalid([_BAD_CODE.format(code=settings.MOCK_VERIFY_CODE)])

    user = _find_by_phone(state, phone)
    if user is None:
        return state, ActionResult.not_found("账号不存在")
    if not verify_password(data.password, user.password_hash):
        return state, ActionResult.invalid(["密码错误"])

    next_state = replace(
        state,
        is_authenticated=True,
        current_user=user,
        current_role=user.role,
        active_customer_id=user.customer_id or state.active_customer_id,
        active_customer_name=user.organization_name,
    )
    return next_state, ActionResult.ok(user.id)


def register_account(state: AppState, ctx: StoreContext, data: RegisterInput) -> Transition:
    phone = data.phone.strip()
    if not data.organization_name.strip():
        return state, ActionResult.invalid(["请输入组织名称"])
    if not data.contact_name.strip():
        return state, ActionResult.invalid(["请输入联系人"])
    if not phone:
        return state, ActionResult.invalid(["请输入手机号"])
    if not data.password.strip():
        return state, ActionResult.invalid(["请输入登录密码"])
    if not _code_matches(data.verify_code):
        return state, ActionResult.invalid([_BAD_CODE.format(code=settings.MOCK_VERIFY_CODE)])
    if _find_by_phone(state, phone) is not None:
        return state, ActionResult.precondition_failed("该手机号已注册")

    user = AuthUser(
        id=ctx.ids.next_id("auth"),
        phone=phone,
        password_hash=hash_password(data.password),
        contact_name=data.contact_name.strip(),
        organization_name=data.organization_name.strip(),
        role=data.role,
        customer_id=ctx.ids.next_id("customer") if data.role == RoleKey.TERMINAL else None,
    )
    return replace(state, auth_users=prepend(state.auth_users, user)), ActionResult.ok(user.id)


def reset_password(state: AppState, ctx: StoreContext, data: ResetPasswordInput) -> Transition:
    phone = data.phone.strip()
    if not phone:
        return state, ActionResult.invalid(["请输入手机号"])
    if not _code_matches(data.verify_code):
        return state, ActionResult.invalid([_BAD_CODE.format(code=settings.MOCK_VERIFY_CODE)])
    if not data.new_password.strip():
        return state, ActionResult.invalid(["请输入新密码"])

    user = _find_by_phone(state, phone)
    if user is None:
        return state, ActionResult.not_found("账号不存在")

    updated = replace(user, password_hash=hash_password(data.new_password))
    return replace(state, auth_users=replace_by_id(state.auth_users, updated)), ActionResult.ok(user.id)


def logout(state: AppState, ctx: StoreContext) -> Transition:
    return replace(state, is_authenticated=False, current_user=None), ActionResult.ok()


def switch_role(state: AppState, ctx: StoreContext, role: RoleKey) -> Transition:
    return replace(state, current_role=role), ActionResult.ok()
