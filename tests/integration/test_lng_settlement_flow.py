"""Integration tests for stamping, invoicing, onboarding and exception cases."""

from httpx import AsyncClient


class TestStampingAndInvoicing:
    async def test_stamp_then_apply_then_issue(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/reconciliations/rc-202602-001/stamp", json={"actor_type": "platform", "actor": "王经理"}
        )
        assert resp.json()["data"]["status"] == "platform-stamped"
        resp = await client.post(
            "/api/v1/reconciliations/rc-202602-001/stamp", json={"actor_type": "customer", "actor": "张三"}
        )
        assert resp.json()["data"]["status"] == "double-confirmed"
        assert len(resp.json()["data"]["stamp_logs"]) == 2

        resp = await client.post(
            "/api/v1/invoices/applications",
            json={
                "statement_id": "rc-202602-001",
                "invoice_title": "华东能源科技有限公司",
                "tax_no": "91320000MA1234567X",
                "applicant": "王经理",
            },
        )
        assert resp.status_code == 201
        application_id = resp.json()["data"]["id"]

        resp = await client.post(
            f"/api/v1/invoices/applications/{application_id}/review",
            json={"action": "approve", "reviewer": "陈会计"},
        )
        invoice_id = resp.json()["data"]["id"]

        resp = await client.post(f"/api/v1/invoices/{invoice_id}/issue", json={"issuer": "陈会计"})
        assert resp.status_code == 200

        invoices = (await client.get("/api/v1/invoices")).json()["data"]
        issued = next(item for item in invoices if item["id"] == invoice_id)
        assert issued["status"] == "issued"
        assert issued["amount"] == 168700
        applications = (await client.get("/api/v1/invoices/applications")).json()["data"]
        assert applications[0]["status"] == "invoiced"

    async def test_customer_stamp_out_of_phase_is_409(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/reconciliations/rc-202602-001/stamp", json={"actor_type": "customer", "actor": "张三"}
        )
        assert resp.status_code == 409
        assert resp.json()["code"] == 5003

    async def test_application_on_draft_statement_is_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/invoices/applications", json={"statement_id": "rc-202602-001"})
        assert resp.status_code == 422
        assert len(resp.json()["data"]["errors"]) == 4

    async def test_upstream_archive(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/reconciliations/upstream-archives",
            json={"upstream_company": "华北气源公司", "period": "2026-02", "file_name": "a.pdf", "archived_by": "周婷"},
        )
        assert resp.status_code == 201
        archives = (await client.get("/api/v1/reconciliations/upstream-archives")).json()["data"]
        assert archives[0]["id"] == resp.json()["data"]["id"]


class TestOnboarding:
    async def test_approve_and_activate(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/onboarding/onb-001/review", json={"action": "approve", "reviewer": "周婷", "level": "A"}
        )
        assert resp.status_code == 200
        resp = await client.post(
            "/api/v1/onboarding/onb-001/contract",
            json={"contract_name": "服务合同.pdf", "effective_date": "2026-02-15"},
        )
        assert resp.status_code == 200
        applications = (await client.get("/api/v1/onboarding")).json()["data"]
        activated = next(item for item in applications if item["id"] == "onb-001")
        assert activated["status"] == "activated"
        assert activated["level"] == "A"

    async def test_incomplete_materials_is_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/onboarding/onb-002/materials", json={"contact_name": "刘主管"})
        assert resp.status_code == 422
        assert resp.json()["code"] == 6001
        assert resp.json()["data"]["errors"][0] == "请输入联系电话"


class TestExceptions:
    async def test_create_and_approve_plan_terminate(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/exceptions",
            json={
                "type": "plan-terminate",
                "target_no": "PL-20260209-001",
                "reason": "客户终止",
                "responsibility_party": "客户",
            },
        )
        assert resp.status_code == 201
        exception_id = resp.json()["data"]["id"]

        resp = await client.post(
            f"/api/v1/exceptions/{exception_id}/process", json={"action": "approve", "reviewer": "周婷"}
        )
        assert resp.status_code == 200
        plan = (await client.get("/api/v1/plans/plan-1001")).json()["data"]
        assert plan["status"] == "cancelled"

    async def test_process_twice_is_409(self, client: AsyncClient) -> None:
        body = {"action": "reject", "reviewer": "周婷"}
        await client.post("/api/v1/exceptions/ex-001/process", json=body)
        resp = await client.post("/api/v1/exceptions/ex-001/process", json=body)
        assert resp.status_code == 409
        assert resp.json()["code"] == 6003
