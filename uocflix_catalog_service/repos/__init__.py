"""Repository classes"""

from uocflix_catalog_service.repos.user_table import UserTable, tables_equal

__all__ = [
    "UserTable",
    "tables_equal",
]
