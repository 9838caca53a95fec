from fastapi import Request

from core.sessions import SessionRegistry
from core.store import EntityStore


# ============================================================
# Application-scoped singletons (created in main.create_app)
# ============================================================
def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions
