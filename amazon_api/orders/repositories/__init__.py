from .order_repository import OrderRepository, SQLiteOrderRepository

__all__ = ["OrderRepository", "SQLiteOrderRepository"]
