"""Gas price lifecycle: draft → published ⇄ off-shelf, plus terminal visibility."""

from dataclasses import replace

from src.lng_common.enums import GasPriceStatus, NotificationCategory, PriceScope, RoleKey
from src.lng_common.records import find_by_id, prepend, replace_by_id
from src.lng_common.results import ActionResult
from src.lng_notification.domain.service import notify
from src.lng_pricing.domain.models import GasPrice, GasPriceDraftInput
from src.lng_store.state import AppState, StoreContext, Transition


def _validate_draft(data: GasPriceDraftInput) -> list[str]:
    errors: list[str] = []
    if not data.source_company.strip():
        errors.append("请输入气源公司")
    if not data.source_site.strip():
        errors.append("请输入气源站点")
    if data.scope == PriceScope.EXCLUSIVE and not (data.customer_id or "").strip():
        errors.append("一户一价必须指定客户")
    if data.price <= 0:
        errors.append("气价必须大于 0")
    if not data.valid_from or not data.valid_to:
        errors.append("请选择有效期起止")
    elif data.valid_from > data.valid_to:
        errors.append("有效期开始日期不能晚于结束日期")
    return errors


def save_gas_price_draft(state: AppState, ctx: StoreContext, data: GasPriceDraftInput) -> Transition:
    errors = _validate_draft(data)
    if errors:
        return state, ActionResult.invalid(errors)

    price = GasPrice(
        id=ctx.ids.next_id("price"),
        source_company=data.source_company.strip(),
        source_site=data.source_site.strip(),
        scope=data.scope,
        customer_id=data.customer_id if data.scope == PriceScope.EXCLUSIVE else None,
        price=data.price,
        valid_from=data.valid_from,
        valid_to=data.valid_to,
        tax_included=data.tax_included,
        note=data.note.strip(),
        status=GasPriceStatus.DRAFT,
        updated_at=ctx.now_iso(),
    )
    return replace(state, gas_prices=prepend(state.gas_prices, price)), ActionResult.ok(price.id)


def publish_gas_price(state: AppState, ctx: StoreContext, price_id: str, operator: str) -> Transition:
    price = find_by_id(state.gas_prices, price_id)
    if price is None:
        return state, ActionResult.not_found("气价不存在")
    if price.status == GasPriceStatus.PUBLISHED:
        return state, ActionResult.precondition_failed("气价已处于发布状态")

    published = replace(
        price, status=GasPriceStatus.PUBLISHED, updated_by=operator, updated_at=ctx.now_iso()
    )
    next_state = replace(
        state,
        gas_prices=replace_by_id(state.gas_prices, published),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "气价已发布",
            f"{price.source_company} {price.source_site} 气价 ¥{price.price:,.2f} 已由 {operator} 发布。",
        ),
    )
    return next_state, ActionResult.ok(price.id)


def take_down_gas_price(state: AppState, ctx: StoreContext, price_id: str, operator: str) -> Transition:
    price = find_by_id(state.gas_prices, price_id)
    if price is None:
        return state, ActionResult.not_found("气价不存在")
    if price.status != GasPriceStatus.PUBLISHED:
        return state, ActionResult.precondition_failed("仅已发布气价可下架")

    off_shelf = replace(
        price, status=GasPriceStatus.OFF_SHELF, updated_by=operator, updated_at=ctx.now_iso()
    )
    next_state = replace(
        state,
        gas_prices=replace_by_id(state.gas_prices, off_shelf),
        notifications=notify(
            state,
            ctx,
            NotificationCategory.SYSTEM,
            "气价已下架",
            f"{price.source_company} {price.source_site} 气价已由 {operator} 下架。",
        ),
    )
    return next_state, ActionResult.ok(price.id)


def visible_gas_prices(state: AppState) -> tuple[GasPrice, ...]:
    """Selector: terminal users see published public prices and their own exclusive ones."""
    if state.current_role != RoleKey.TERMINAL:
        return state.gas_prices
    return tuple(p for p in state.gas_prices if p.is_visible_to(state.active_customer_id))
