"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Progress : Couple (courant, total) avec pourcentage et completion
- WatchStatus : Statut de visionnage (films, series)
- ReadStatus : Statut de lecture (livres, mangas, webtoons...)
- ReadableKind : Sous-type d'un media a lire
- encode_score / decode_score : Codec de note 0.0-10.0 <-> 0-100
"""

from kars.core.value_objects.progress import Progress
from kars.core.value_objects.score import decode_score, encode_score
from kars.core.value_objects.status import (
    ReadableKind,
    ReadStatus,
    WatchStatus,
    parse_read_status,
    parse_watch_status,
)

__all__ = [
    "Progress",
    "ReadableKind",
    "ReadStatus",
    "WatchStatus",
    "decode_score",
    "encode_score",
    "parse_read_status",
    "parse_watch_status",
]
