"""Series genres"""
from enum import IntEnum


class Genre(IntEnum):
    """Genre of a series. Values are dense ordinals usable as array indexes."""
    ACTION = 0
    ANIMATION = 1
    COMEDY = 2
    DOCUMENTARY = 3
    DRAMA = 4
    FANTASY = 5
    HORROR = 6
    SCIFI = 7
