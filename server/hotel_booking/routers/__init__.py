"""FastAPI routers package."""

from .booking import router as booking_router
from .metrics import router as metrics_router

__all__ = [
    "booking_router",
    "metrics_router",
]
