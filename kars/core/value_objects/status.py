"""
Vocabulaires de statut et sous-types de lecture.

Deux enumerations paralleles a cinq etats : une orientee visionnage
(films, series) et une orientee lecture. Les valeurs sont les chaines
snake_case utilisees sur le fil et en base.

Equivalences : watching <-> reading, plan_to_watch <-> plan_to_read ;
completed, on_hold et dropped sont partages.
"""

from enum import Enum


class WatchStatus(Enum):
    """Statut de visionnage d'un film ou d'une serie."""

    WATCHING = "watching"
    PLAN_TO_WATCH = "plan_to_watch"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    def as_read_status(self) -> "ReadStatus":
        """Retourne le statut de lecture equivalent."""
        return _WATCH_TO_READ[self]


class ReadStatus(Enum):
    """Statut de lecture d'un livre, manga, webtoon, etc."""

    READING = "reading"
    PLAN_TO_READ = "plan_to_read"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    def as_watch_status(self) -> WatchStatus:
        """Retourne le statut de visionnage equivalent."""
        return _READ_TO_WATCH[self]


class ReadableKind(Enum):
    """Sous-type d'un media a lire."""

    BOOK = "book"
    WEB_NOVEL = "web_novel"
    LIGHT_NOVEL = "light_novel"
    MANGA = "manga"
    MANHWA = "manhwa"
    WEBTOON = "webtoon"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_LABELS = {
    "watching": "Watching",
    "reading": "Reading",
    "plan_to_watch": "Plan to Watch",
    "plan_to_read": "Plan to Read",
    "completed": "Completed",
    "on_hold": "On Hold",
    "dropped": "Dropped",
}

_WATCH_TO_READ = {
    WatchStatus.WATCHING: ReadStatus.READING,
    WatchStatus.PLAN_TO_WATCH: ReadStatus.PLAN_TO_READ,
    WatchStatus.COMPLETED: ReadStatus.COMPLETED,
    WatchStatus.ON_HOLD: ReadStatus.ON_HOLD,
    WatchStatus.DROPPED: ReadStatus.DROPPED,
}

_READ_TO_WATCH = {read: watch for watch, read in _WATCH_TO_READ.items()}


def parse_watch_status(value: str | None) -> WatchStatus:
    """
    Interprete une chaine de statut de visionnage.

    Accepte aussi le vocabulaire de lecture (reading -> watching).
    Une chaine inconnue ou absente donne PLAN_TO_WATCH : ce n'est pas
    une erreur.
    """
    if value is None:
        return WatchStatus.PLAN_TO_WATCH
    try:
        return WatchStatus(value)
    except ValueError:
        pass
    try:
        return ReadStatus(value).as_watch_status()
    except ValueError:
        return WatchStatus.PLAN_TO_WATCH


def parse_read_status(value: str | None) -> ReadStatus:
    """
    Interprete une chaine de statut de lecture.

    Accepte aussi le vocabulaire de visionnage (watching -> reading).
    Une chaine inconnue ou absente donne PLAN_TO_READ.
    """
    if value is None:
        return ReadStatus.PLAN_TO_READ
    try:
        return ReadStatus(value)
    except ValueError:
        pass
    try:
        return WatchStatus(value).as_read_status()
    except ValueError:
        return ReadStatus.PLAN_TO_READ
