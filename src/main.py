"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.lng_account.api.router import router as account_router
from src.lng_auth.api.router import router as auth_router
from src.lng_common.errors import AppError
from src.lng_common.request_log import RequestLogMiddleware
from src.lng_common.response import error_response
from src.lng_exception.api.router import router as exception_router
from src.lng_invoice.api.router import router as invoice_router
from src.lng_masterdata.api.router import router as masterdata_router
from src.lng_notification.api.router import router as notification_router
from src.lng_onboarding.api.router import router as onboarding_router
from src.lng_order.api.router import router as order_router
from src.lng_plan.api.router import router as plan_router
from src.lng_pricing.api.router import router as pricing_router
from src.lng_reconciliation.api.router import router as reconciliation_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, exc.errors)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(auth_router, prefix="/api/v1")
app.include_router(masterdata_router, prefix="/api/v1")
app.include_router(pricing_router, prefix="/api/v1")
app.include_router(plan_router, prefix="/api/v1")
app.include_router(order_router, prefix="/api/v1")
app.include_router(account_router, prefix="/api/v1")
app.include_router(reconciliation_router, prefix="/api/v1")
app.include_router(invoice_router, prefix="/api/v1")
app.include_router(onboarding_router, prefix="/api/v1")
app.include_router(exception_router, prefix="/api/v1")
app.include_router(notification_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
