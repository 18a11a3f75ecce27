# rental_api/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from rental_api.api import ROUTERS
from rental_api.core.errors import register_error_handlers
from rental_api.core.settings import settings
from rental_api.db import SessionLocal, close_db, init_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s | %(message)s",
)
log = logging.getLogger("rental-api")

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        init_db()
    yield
    close_db()


app = FastAPI(
    title="Apartment Rental API",
    lifespan=lifespan,
)

# ───── CORS ─────
# 기본은 모든 출처 허용("*"), RENTAL_API_ALLOWED_ORIGINS 로 좁힐 수 있음
ALLOWED_ORIGINS = settings.cors_origins
ALLOW_ALL = "*" in ALLOWED_ORIGINS
app.add_middleware(
   CORSMiddleware,
   allow_origins=(["*"] if ALLOW_ALL else ALLOWED_ORIGINS),
   allow_methods=["*"],
   allow_headers=["*"],
   allow_credentials=False,  # 세션 쿠키 미사용
)

register_error_handlers(app)

# ───── Health ─────
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/health/db")
def health_db():
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"db": True}
    except Exception as e:
        log.warning(f"db health check failed: {e}")
        return {"db": False}

# ───── Routers ─────
# /api/apartments, /api/bookings, /api/feedbacks, /api/installment-plans,
# /api/inventories, /api/payments, /api/users
for router in ROUTERS:
    app.include_router(router)


@app.middleware("http")
async def log_timing(request, call_next):
    t0 = time.perf_counter()
    resp = await call_next(request)
    dt = (time.perf_counter() - t0) * 1000
    log.info(f"[{request.method}] {request.url.path}?{request.query_params} -> {resp.status_code} {dt:.1f}ms")
    return resp


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
