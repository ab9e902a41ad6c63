"""
Database definitions and collection constants.
"""
from hotel_auth.database.databases import auth_db

__all__ = ["auth_db"]
