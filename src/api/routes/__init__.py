"""API route modules."""

from src.api.routes.data import router as data_router
from src.api.routes.groups import router as groups_router
from src.api.routes.health import router as health_router
from src.api.routes.processes import router as processes_router
from src.api.routes.reports import router as reports_router
from src.api.routes.stock import router as stock_router

__all__ = [
    "health_router",
    "stock_router",
    "processes_router",
    "reports_router",
    "groups_router",
    "data_router",
]
