"""Unit tests for gas price drafts, publishing and terminal visibility."""

import pytest

from src.lng_common.enums import GasPriceStatus, PriceScope, RoleKey
from src.lng_common.records import find_by_id
from src.lng_common.results import Outcome
from src.lng_pricing.domain.models import GasPriceDraftInput
from src.lng_store.store import DomainStore


def _draft(**overrides) -> GasPriceDraftInput:
    base = dict(
        source_company="中海气源公司",
        source_site="宁波接收站",
        scope=PriceScope.PUBLIC,
        price=4010,
        valid_from="2026-02-16",
        valid_to="2026-02-28",
    )
    base.update(overrides)
    return GasPriceDraftInput(**base)


class TestSaveDraft:
    def test_saved_as_draft(self, store: DomainStore) -> None:
        result = store.save_gas_price_draft(_draft())
        price = find_by_id(store.state.gas_prices, result.entity_id)
        assert price.status == GasPriceStatus.DRAFT
        assert price.updated_at == "2026-02-10T09:00:00.000Z"

    def test_public_price_drops_customer(self, store: DomainStore) -> None:
        result = store.save_gas_price_draft(_draft(customer_id="customer-a"))
        assert find_by_id(store.state.gas_prices, result.entity_id).customer_id is None

    def test_collects_errors(self, store: DomainStore) -> None:
        result = store.save_gas_price_draft(
            _draft(source_company=" ", scope=PriceScope.EXCLUSIVE, price=0, valid_from="2026-03-01")
        )
        assert result.outcome is Outcome.INVALID
        assert result.errors == (
            "请输入气源公司",
            "一户一价必须指定客户",
            "气价必须大于 0",
            "有效期开始日期不能晚于结束日期",
        )

    def test_missing_dates(self, store: DomainStore) -> None:
        assert store.save_gas_price_draft(_draft(valid_to="")).errors == ("请选择有效期起止",)


class TestPublishing:
    def test_publish_draft_notifies(self, store: DomainStore) -> None:
        price_id = store.save_gas_price_draft(_draft()).entity_id
        assert store.publish_gas_price(price_id, "周婷").success
        price = find_by_id(store.state.gas_prices, price_id)
        assert price.status == GasPriceStatus.PUBLISHED
        assert price.updated_by == "周婷"
        assert store.state.notifications[0].title == "气价已发布"

    def test_publish_twice_refused(self, store: DomainStore) -> None:
        result = store.publish_gas_price("price-public-1", "周婷")
        assert result.outcome is Outcome.PRECONDITION_FAILED

    def test_take_down_and_republish(self, store: DomainStore) -> None:
        assert store.take_down_gas_price("price-public-2", "周婷").success
        assert find_by_id(store.state.gas_prices, "price-public-2").status == GasPriceStatus.OFF_SHELF
        assert store.take_down_gas_price("price-public-2", "周婷").outcome is Outcome.PRECONDITION_FAILED
        assert store.publish_gas_price("price-public-2", "周婷").success

    @pytest.mark.parametrize("operation", ["publish_gas_price", "take_down_gas_price"])
    def test_unknown_price(self, store: DomainStore, operation: str) -> None:
        assert getattr(store, operation)("nope", "x").error == "气价不存在"


class TestVisibility:
    def test_terminal_sees_public_and_own_exclusive(self, store: DomainStore) -> None:
        store.save_gas_price_draft(_draft())
        ids = [price.id for price in store.visible_gas_prices()]
        assert ids == ["price-public-1", "price-exclusive-a", "price-public-2"]

    def test_other_customer_exclusive_hidden(self, store: DomainStore) -> None:
        price_id = store.save_gas_price_draft(
            _draft(scope=PriceScope.EXCLUSIVE, customer_id="customer-b")
        ).entity_id
        store.publish_gas_price(price_id, "周婷")
        assert price_id not in [price.id for price in store.visible_gas_prices()]

    def test_staff_see_everything(self, store: DomainStore) -> None:
        store.save_gas_price_draft(_draft())
        store.switch_role(RoleKey.MARKET)
        assert len(store.visible_gas_prices()) == 4
