# -------------------------
# Enums
# -------------------------
from .enums import (
    NoticeCategory,
    ResidentStatus,
    ResidentType,
    TransactionType,
    UserRole,
)

# -------------------------
# Condominium Models
# -------------------------
from .condominium import (
    Condominium,
    CondominiumBase,
    CondominiumCreate,
    CondoSwitchRequest,
)

# -------------------------
# Resident Models
# -------------------------
from .resident import (
    ProfileUpdate,
    Resident,
    ResidentBase,
    ResidentCreate,
    ResidentUpdate,
)

# -------------------------
# Provider / Meeting / Notice / Transaction
# -------------------------
from .provider import Provider, ProviderCreate, ProviderUpdate
from .meeting import Meeting, MeetingCreate
from .notice import Notice, NoticeCreate, NoticeDraftRequest, NoticeDraftResponse
from .transaction import FinancialSummary, Transaction, TransactionCreate

# -------------------------
# Chat
# -------------------------
from .message import (
    ChatMessage,
    MarkReadResponse,
    MessageCreate,
    ThreadSummary,
    UnreadCount,
)

# -------------------------
# Auth
# -------------------------
from .auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    SessionRead,
    TokenResponse,
)
