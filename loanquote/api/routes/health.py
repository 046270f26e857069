from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Liveness probe for the quote service")
def healthcheck() -> dict[str, str]:
    # No market access here, so a broken market file does not fail liveness.
    return {"status": "ok", "service": "loanquote"}
