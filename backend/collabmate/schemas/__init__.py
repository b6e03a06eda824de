from .application import ApplicationCreate, ApplicationRead, ApplicationResult
from .enums import (
    DecisionStatus,
    NotificationType,
    ProjectMemberRole,
    ProjectStatus,
    RequestStatus,
)
from .lifecycle import LifecycleResult, SideEffectWarning, StatusUpdate
from .notification import MarkReadResponse, NotificationRead, UnreadCount
from .pagination import PaginatedResponse
from .project import ProjectCreate, ProjectMemberRead, ProjectRead
from .skill_swap import (
    SkillSwapCreate,
    SkillSwapRead,
    SkillSwapResult,
    StatusHistoryRead,
    SwapMessageCreate,
    SwapMessageRead,
)
from .user import Token, UserCreate, UserRead, UserSummary

__all__ = [
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationResult",
    "DecisionStatus",
    "NotificationType",
    "ProjectMemberRole",
    "ProjectStatus",
    "RequestStatus",
    "LifecycleResult",
    "SideEffectWarning",
    "StatusUpdate",
    "MarkReadResponse",
    "NotificationRead",
    "UnreadCount",
    "PaginatedResponse",
    "ProjectCreate",
    "ProjectMemberRead",
    "ProjectRead",
    "SkillSwapCreate",
    "SkillSwapRead",
    "SkillSwapResult",
    "StatusHistoryRead",
    "SwapMessageCreate",
    "SwapMessageRead",
    "Token",
    "UserCreate",
    "UserRead",
    "UserSummary",
]
