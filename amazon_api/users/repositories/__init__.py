from .user_repository import SQLiteUserRepository, UserRepository

__all__ = ["SQLiteUserRepository", "UserRepository"]
