from app.services.user_service import StoreError, UserService

__all__ = ["StoreError", "UserService"]
