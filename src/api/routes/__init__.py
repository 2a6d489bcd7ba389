"""API route modules."""

from .breaks import router as breaks_router
from .files import router as files_router
from .guides import router as guides_router
from .health import router as health_router
from .software import router as software_router
from .tasks import router as tasks_router

__all__ = [
    "breaks_router",
    "files_router",
    "guides_router",
    "health_router",
    "software_router",
    "tasks_router",
]
