# Enums for CollabMate
from enum import Enum


class RequestStatus(str, Enum):
    """Status shared by project applications and skill swaps"""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class DecisionStatus(str, Enum):
    """Statuses a pending request can be moved to"""

    ACCEPTED = "accepted"
    DECLINED = "declined"


class ProjectStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ProjectMemberRole(str, Enum):
    """Role of project member"""

    OWNER = "owner"
    MEMBER = "member"


class NotificationType(str, Enum):
    APPLICATION_CREATED = "application_created"
    APPLICATION_ACCEPTED = "application_accepted"
    APPLICATION_DECLINED = "application_declined"
    SWAP_PROPOSED = "swap_proposed"
    SWAP_ACCEPTED = "swap_accepted"
    SWAP_DECLINED = "swap_declined"


__all__ = [
    "RequestStatus",
    "DecisionStatus",
    "ProjectStatus",
    "ProjectMemberRole",
    "NotificationType",
]
