# routers/providers.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query

from core.errors import StoreError, handle_store_error
from core.permission_helpers import requires_permission
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.provider import Provider, ProviderCreate, ProviderUpdate


router = APIRouter(
    prefix="/providers",
    tags=["Providers"],
)


@router.get(
    "",
    response_model=List[Provider],
    summary="List service providers",
    dependencies=[Depends(requires_permission("providers:read"))],
)
def list_providers(
    active_only: bool = Query(False, description="Only providers currently active"),
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    return store.list_providers(condo_id, active_only=active_only)


@router.post(
    "",
    response_model=Provider,
    summary="Add service provider",
    dependencies=[Depends(requires_permission("providers:write"))],
)
def create_provider(
    payload: ProviderCreate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    return store.add_provider(condo_id, {**payload.model_dump(), "active": True})


@router.patch(
    "/{provider_id}",
    response_model=Provider,
    summary="Update provider / toggle active",
    dependencies=[Depends(requires_permission("providers:write"))],
)
def update_provider(
    provider_id: str,
    payload: ProviderUpdate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    try:
        provider = store.get_provider(provider_id)
        if provider.condo_id != condo_id:
            raise HTTPException(404, "Prestador não encontrado.")
        return store.update_provider(provider_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    except StoreError as e:
        raise handle_store_error(e, "Update provider")
