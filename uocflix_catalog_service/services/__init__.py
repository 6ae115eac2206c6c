"""Service functions"""

from .favorites_service import (
    add_favorite,
    favorite_genre_breakdown,
    favorites_frame,
    get_favorite_genre,
    get_favs_cnt_per_series,
    get_favs_length_in_min,
)

__all__ = [
    "add_favorite",
    "get_favorite_genre",
    "get_favs_cnt_per_series",
    "get_favs_length_in_min",
    "favorites_frame",
    "favorite_genre_breakdown",
]
