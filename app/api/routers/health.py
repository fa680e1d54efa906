# app/api/routers/health.py
from fastapi import APIRouter

from app.domain.schemas import HealthOut
from app.utils.settings import SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return {"status": "ok", "service": SERVICE_NAME}
