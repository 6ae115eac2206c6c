"""Queries over a user's favorites stack."""
from typing import Optional
import logging

import numpy as np
import pandas as pd

from uocflix_catalog_service.models import Favorite, Film, Genre, Series, User

logger = logging.getLogger(__name__)

FAVORITES_COLUMNS = ['film', 'series', 'genre', 'duration']


def _require_user(user: User) -> None:
    if user is None:
        raise ValueError("user is required")
    if user.favorites is None:
        raise ValueError(f"user {user.username!r} has been freed")


def add_favorite(user: User, film: Film) -> None:
    """
    Push a favorite for ``film`` on top of the user's favorites.

    Args:
        user: Owner of the favorites
        film: Film to save
    """
    _require_user(user)
    if film is None:
        raise ValueError("film is required")

    user.favorites.push(Favorite(film=film))
    logger.debug(f"{user.username} favorited '{film.name}' ({len(user.favorites)} favorites)")


def get_favorite_genre(user: User) -> Optional[Genre]:
    """
    Get the genre that appears most among the user's favorites.

    Favorites are visited in pop order (newest first) on a duplicate of
    the stack, so the user's favorites are left as they were. On a tie,
    the genre that reached the winning count first wins.

    Args:
        user: User to inspect

    Returns:
        Most frequent genre, or None if the user has no favorites
    """
    _require_user(user)

    working = user.favorites.duplicate()
    occurrences = np.zeros(len(Genre), dtype=int)
    favorite_genre: Optional[Genre] = None
    max_occurrences = 0

    while not working.is_empty():
        genre = working.pop().film.genre
        occurrences[genre] += 1

        # Strictly greater: an equal count never takes over the lead
        if occurrences[genre] > max_occurrences:
            favorite_genre = genre
            max_occurrences = int(occurrences[genre])

    return favorite_genre


def get_favs_cnt_per_series(user: User, series: Series) -> int:
    """Count the user's favorites whose film belongs to ``series``."""
    _require_user(user)
    if series is None:
        raise ValueError("series is required")

    return user.favorites.count_per_series(series)


def get_favs_length_in_min(user: User) -> int:
    """Total runtime of the user's favorites, in minutes."""
    _require_user(user)

    return user.favorites.length_in_min()


def favorites_frame(user: User) -> pd.DataFrame:
    """
    Tabulate the user's favorites in pop order.

    Returns:
        DataFrame with columns film, series, genre, duration
    """
    _require_user(user)

    rows = [
        {
            'film': favorite.film.name,
            'series': favorite.film.series.name,
            'genre': favorite.film.genre.name,
            'duration': favorite.film.duration,
        }
        for favorite in user.favorites
    ]
    return pd.DataFrame(rows, columns=FAVORITES_COLUMNS)


def favorite_genre_breakdown(user: User) -> pd.Series:
    """
    Count favorites per genre name, most frequent first.

    Genres without favorites are omitted.
    """
    frame = favorites_frame(user)
    counts = frame['genre'].value_counts()
    counts.name = 'favorites'
    return counts
