from . import applications, auth, notifications, projects, skill_swaps

__all__ = [
    "applications",
    "auth",
    "notifications",
    "projects",
    "skill_swaps",
]
