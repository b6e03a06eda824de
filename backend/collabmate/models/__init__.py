from .notification import Notification
from .project import Project
from .project_application import ProjectApplication
from .project_member import ProjectMember
from .skill_swap import SkillSwap, SkillSwapMessage, SkillSwapStatusHistory
from .user import User

__all__ = [
    "User",
    "Project",
    "ProjectMember",
    "ProjectApplication",
    "SkillSwap",
    "SkillSwapMessage",
    "SkillSwapStatusHistory",
    "Notification",
]
