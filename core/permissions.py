# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# ============================================
from models.enums import UserRole


ROLE_PERMISSIONS = {

    # =====================================================
    # SÍNDICO: full read/write over the active condominium
    # =====================================================
    UserRole.sindico.value: [
        "dashboard:read",

        # Condominiums
        "condos:write",
        "condos:switch",

        # Residents + approval workflow
        "residents:read", "residents:write",
        "residents:approve",

        "providers:read", "providers:write",
        "meetings:read", "meetings:write",
        "notices:read", "notices:write",
        "finance:read", "finance:write",

        # Direct messages with residents
        "messages:read", "messages:write",

        # AI drafting of notices
        "ai:draft",
    ],

    # =====================================================
    # MORADOR: read-mostly, own profile and own thread
    # =====================================================
    UserRole.morador.value: [
        "notices:read",
        "meetings:read",
        "profile:write",
        "messages:read", "messages:write",
    ],
}


# -----------------------------------------------------
# Collect effective permissions for a role
# -----------------------------------------------------
def get_effective_permissions(role) -> set:
    if role is None:
        return set()
    return set(ROLE_PERMISSIONS.get(str(role), []))


# -----------------------------------------------------
# Capability check: the single place role rules live
# -----------------------------------------------------
def can(role, action: str) -> bool:
    effective = get_effective_permissions(role)

    # Wildcard grants everything
    if "*" in effective:
        return True

    return action in effective
