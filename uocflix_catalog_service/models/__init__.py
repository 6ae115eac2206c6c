"""Catalog models"""

from uocflix_catalog_service.models.genre import Genre
from uocflix_catalog_service.models.film import Film, Series
from uocflix_catalog_service.models.favorite import Favorite, FavoriteStack
from uocflix_catalog_service.models.user import User

__all__ = [
    "Genre",
    "Series",
    "Film",
    "Favorite",
    "FavoriteStack",
    "User",
]
