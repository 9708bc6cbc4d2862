"""Integration tests for order fulfillment over HTTP."""

from httpx import AsyncClient

ORDER = "/api/v1/orders/order-2001"


class TestFulfillment:
    async def test_unload_accept_settle_archive(self, client: AsyncClient) -> None:
        resp = await client.post(f"{ORDER}/unload", json={"weight": 17.8})
        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "pending-acceptance"

        resp = await client.post(f"{ORDER}/accept", json={"accepted": True, "settlement_weight": 17.8})
        assert resp.json()["data"]["status"] == "accepted"

        resp = await client.post(f"{ORDER}/settle", json={"operator": "陈会计"})
        assert resp.json()["data"]["status"] == "settled"

        resp = await client.post(f"{ORDER}/archive", json={"operator": "刘工"})
        assert resp.json()["data"]["status"] == "archived"

        resp = await client.post(f"{ORDER}/unarchive", json={"operator": "刘工"})
        assert resp.json()["data"]["status"] == "settled"

    async def test_weigh_difference_raises_notification(self, client: AsyncClient) -> None:
        resp = await client.post(f"{ORDER}/unload", json={"weight": 17.0})
        data = resp.json()["data"]
        assert data["status"] == "settling"
        assert data["diff_abnormal"] is True

        unread = (await client.get("/api/v1/notifications", params={"unread_only": True})).json()["data"]
        assert unread[0]["title"] == "磅差异常提醒"

        resp = await client.post(f"{ORDER}/resolve-diff", json={"settlement_weight": 17.5, "note": "协商"})
        assert resp.json()["data"]["status"] == "pending-acceptance"

    async def test_load_and_depart(self, client: AsyncClient) -> None:
        await client.post(f"{ORDER}/load", json={"weight": 18.1})
        resp = await client.post(f"{ORDER}/depart")
        assert resp.json()["data"]["status"] == "transporting"

    async def test_depart_out_of_order_is_409(self, client: AsyncClient) -> None:
        resp = await client.post(f"{ORDER}/depart")
        assert resp.status_code == 409
        assert resp.json()["code"] == 4003

    async def test_archive_in_transit_is_409(self, client: AsyncClient) -> None:
        resp = await client.post(f"{ORDER}/archive", json={"operator": "刘工"})
        assert resp.status_code == 409
        assert resp.json()["message"] == "仅已验收/已结算订单可归档"

    async def test_unknown_order_is_404(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/orders/nope/unload", json={"weight": 1})
        assert resp.status_code == 404
        assert resp.json()["code"] == 4002

    async def test_negative_weight_is_422(self, client: AsyncClient) -> None:
        resp = await client.post(f"{ORDER}/unload", json={"weight": -1})
        assert resp.status_code == 422


async def test_supplement_review(client: AsyncClient) -> None:
    resp = await client.post(
        f"{ORDER}/supplement",
        json={"upstream_order_no": "UP-1", "load_site_name": "宁波接收站", "estimated_load_at": "2026-02-11"},
    )
    assert resp.json()["data"]["supplement_status"] == "pending"

    resp = await client.post(f"{ORDER}/supplement/review", json={"action": "approve", "reviewer": "刘工"})
    assert resp.json()["data"]["status"] == "stocking"

    resp = await client.post(f"{ORDER}/supplement/review", json={"action": "approve", "reviewer": "刘工"})
    assert resp.status_code == 409


async def test_mark_notification_read(client: AsyncClient) -> None:
    resp = await client.post("/api/v1/notifications/msg-init-1/read")
    assert resp.status_code == 200
    unread = (await client.get("/api/v1/notifications", params={"unread_only": True})).json()["data"]
    assert all(item["id"] != "msg-init-1" for item in unread)

    resp = await client.post("/api/v1/notifications/nope/read")
    assert resp.status_code == 404
    assert resp.json()["code"] == 9002
