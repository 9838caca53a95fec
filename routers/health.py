# routers/health.py

from fastapi import APIRouter, Depends

from core.store import EntityStore
from dependencies.store import get_store

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/app
# Simple API health check for uptime monitors
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    return {
        "service": "SyndicPro API",
        "status": "ok",
    }


# -----------------------------------------------------
# GET /health/store
# Row counts per in-memory collection (no auth required)
# -----------------------------------------------------
@router.get("/store", summary="In-memory store health check")
def health_store(store: EntityStore = Depends(get_store)):
    return {
        "service": "EntityStore",
        "status": "ok",
        "details": {
            "condos": len(store.condos),
            "residents": len(store.residents),
            "providers": len(store.providers),
            "meetings": len(store.meetings),
            "notices": len(store.notices),
            "transactions": len(store.transactions),
            "messages": len(store.messages),
        },
    }
