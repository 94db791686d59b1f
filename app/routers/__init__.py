
from .recipe import router as recipe_router
from .health import router as health_router

__all__ = ["recipe_router", "health_router"]
