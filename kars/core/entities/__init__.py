"""
Business entities representing core domain concepts.

Exports:
- MediaRecord: A tracked media item (the aggregate)
- Movie, Series, Readable: Variants of the MediaKind tagged union
- MediaKind: Union of the three variants
- FAVORITE_TAG: Tag doubling as the favorite flag on the API
"""

from kars.core.entities.media import (
    FAVORITE_TAG,
    MediaKind,
    MediaRecord,
    Movie,
    NoProgressError,
    Readable,
    Series,
)

__all__ = [
    "FAVORITE_TAG",
    "MediaKind",
    "MediaRecord",
    "Movie",
    "NoProgressError",
    "Readable",
    "Series",
]
