"""
API routers.
"""
from hotel_auth.routers import auth, health

__all__ = ["auth", "health"]
