from .database import async_session_manager, engine, init_db
from .settings import settings
from .table_names import TableNames

__all__ = [
    "settings",
    "engine",
    "init_db",
    "async_session_manager",
    "TableNames",
]
