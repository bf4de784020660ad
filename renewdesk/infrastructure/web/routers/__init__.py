from . import contracts, customers, dashboard, notifications

__all__ = ["contracts", "customers", "dashboard", "notifications"]
