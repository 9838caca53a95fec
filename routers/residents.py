# routers/residents.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from core.errors import StoreError, handle_store_error
from core.permission_helpers import requires_permission
from core.sessions import Session
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.enums import ResidentStatus
from models.resident import ProfileUpdate, Resident, ResidentCreate, ResidentUpdate


router = APIRouter(
    prefix="/residents",
    tags=["Residents"],
)


def _resident_in_condo(store: EntityStore, resident_id: str, condo_id: str) -> Resident:
    """Fetch a resident of the active condominium; other tenants look like 404."""
    try:
        resident = store.get_resident(resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Fetch resident")
    if resident.condo_id != condo_id:
        raise HTTPException(404, "Morador não encontrado.")
    return resident


# ============================================================
# LIST ACTIVE RESIDENTS
# ============================================================
@router.get(
    "",
    response_model=List[Resident],
    summary="List residents",
    dependencies=[Depends(requires_permission("residents:read"))],
)
def list_residents(
    search: Optional[str] = Query(None, description="Case-insensitive match on name, unit or email"),
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    residents = store.list_residents(condo_id, status=ResidentStatus.active)
    if search:
        needle = search.strip().lower()
        residents = [
            r for r in residents
            if needle in r.name.lower() or needle in r.unit.lower() or needle in r.email.lower()
        ]
    return residents


# ============================================================
# APPROVALS VIEW
# ============================================================
@router.get(
    "/pending",
    response_model=List[Resident],
    summary="Residents awaiting approval",
    dependencies=[Depends(requires_permission("residents:approve"))],
)
def list_pending_residents(
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    return store.list_residents(condo_id, status=ResidentStatus.pending)


# ============================================================
# OWN PROFILE (resident)
# ============================================================
@router.get("/me", response_model=Resident, summary="My profile")
def read_profile(
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("profile:write")),
):
    try:
        return store.get_resident(session.resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Fetch profile")


@router.patch("/me", response_model=Resident, summary="Update my contact details")
def update_profile(
    payload: ProfileUpdate,
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("profile:write")),
):
    fields = payload.model_dump(exclude_unset=True, exclude_none=True)

    try:
        if "email" in fields:
            fields["email"] = fields["email"].strip().lower()
            store.ensure_email_available(fields["email"], exclude_id=session.resident_id)
        return store.update_resident(session.resident_id, fields)
    except StoreError as e:
        raise handle_store_error(e, "Update profile")


# ============================================================
# MANAGER QUICK ADD (active immediately)
# ============================================================
@router.post(
    "",
    response_model=Resident,
    summary="Add resident",
    dependencies=[Depends(requires_permission("residents:write"))],
)
def create_resident(
    payload: ResidentCreate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    data = payload.model_dump()
    data["email"] = (data.get("email") or "").strip().lower()

    try:
        store.ensure_email_available(data["email"])
    except StoreError as e:
        raise handle_store_error(e, "Add resident")

    return store.add_resident(condo_id, {**data, "status": ResidentStatus.active})


@router.patch(
    "/{resident_id}",
    response_model=Resident,
    summary="Update resident",
    dependencies=[Depends(requires_permission("residents:write"))],
)
def update_resident(
    resident_id: str,
    payload: ResidentUpdate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    _resident_in_condo(store, resident_id, condo_id)
    # null leaves a field unchanged
    fields = payload.model_dump(exclude_unset=True, exclude_none=True)

    try:
        if "email" in fields:
            fields["email"] = fields["email"].strip().lower()
            store.ensure_email_available(fields["email"], exclude_id=resident_id)
        return store.update_resident(resident_id, fields)
    except StoreError as e:
        raise handle_store_error(e, "Update resident")


# ============================================================
# APPROVE / REJECT
# ============================================================
@router.post(
    "/{resident_id}/approve",
    response_model=Resident,
    summary="Approve pending resident",
    dependencies=[Depends(requires_permission("residents:approve"))],
)
def approve_resident(
    resident_id: str,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    _resident_in_condo(store, resident_id, condo_id)
    try:
        return store.approve_resident(resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Approve resident")


@router.post(
    "/{resident_id}/reject",
    summary="Reject pending resident",
    dependencies=[Depends(requires_permission("residents:approve"))],
)
def reject_resident(
    resident_id: str,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    """
    Removes the pending registration. Rejecting an id that is already gone
    succeeds with removed=false.
    """
    existing = store.find_resident(resident_id)
    if existing is not None and existing.condo_id != condo_id:
        raise HTTPException(404, "Morador não encontrado.")

    try:
        removed = store.remove_resident(resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Reject resident")

    return {"success": True, "removed": removed}
