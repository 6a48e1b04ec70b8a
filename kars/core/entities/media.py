"""
Media entities.

A MediaRecord is the aggregate tracked by the archive. Its `kind` is a
tagged union of three frozen variants (Movie, Series, Readable): the
variant class is the discriminator, so the discriminator and its payload
can never disagree. A movie carries no progress; series and readables do.
"""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional, Union
from uuid import UUID, uuid4

from kars.core.value_objects import (
    Progress,
    ReadableKind,
    ReadStatus,
    WatchStatus,
    decode_score,
    encode_score,
)

FAVORITE_TAG = "favorite"


class NoProgressError(ValueError):
    """Raised when a progress update targets a movie."""


@dataclass(frozen=True)
class Movie:
    """A movie: watch status only, no progress concept."""

    status: WatchStatus = WatchStatus.PLAN_TO_WATCH

    media_type: ClassVar[str] = "movie"


@dataclass(frozen=True)
class Series:
    """
    An episodic work (TV series or anime).

    Attributes:
        progress: Episodes watched / total episodes
        status: Watch status
    """

    progress: Progress = field(default_factory=Progress)
    status: WatchStatus = WatchStatus.PLAN_TO_WATCH

    media_type: ClassVar[str] = "series"


@dataclass(frozen=True)
class Readable:
    """
    A readable work (book, novel, manga, manhwa, webtoon).

    Attributes:
        readable_kind: Sub-kind of the work
        progress: Chapters or pages read / total
        status: Read status
    """

    readable_kind: ReadableKind
    progress: Progress = field(default_factory=Progress)
    status: ReadStatus = ReadStatus.PLAN_TO_READ

    media_type: ClassVar[str] = "readable"


MediaKind = Union[Movie, Series, Readable]


@dataclass
class MediaRecord:
    """
    A tracked media item.

    Attributes:
        title: Display title (non-empty, checked at the API boundary)
        kind: Active variant (Movie, Series or Readable)
        id: Unique identifier, generated at creation
        score: Personal score, 0-100 (represents 0.0-10.0)
        global_score: Catalog score, 0-100 (represents 0.0-10.0)
        external_id: Numeric id in the source catalog
        poster_url: Cover image URL
        source: Catalog that originated the record ("anilist", "tmdb"...)
        tags: Free-text tags; "favorite" marks a favorite
    """

    title: str
    kind: MediaKind
    id: UUID = field(default_factory=uuid4)
    score: Optional[int] = None
    global_score: Optional[int] = None
    external_id: Optional[int] = None
    poster_url: Optional[str] = None
    source: Optional[str] = None
    tags: set[str] = field(default_factory=set)

    @classmethod
    def new(cls, title: str, kind: MediaKind) -> "MediaRecord":
        """Creates a record with a fresh identifier and no scores."""
        return cls(title=title, kind=kind)

    @property
    def status(self) -> WatchStatus | ReadStatus:
        return self.kind.status

    @property
    def progress(self) -> Optional[Progress]:
        """Embedded progress, None for movies."""
        if isinstance(self.kind, Movie):
            return None
        return self.kind.progress

    @property
    def score_display(self) -> Optional[float]:
        return decode_score(self.score) if self.score is not None else None

    @property
    def global_score_display(self) -> Optional[float]:
        return decode_score(self.global_score) if self.global_score is not None else None

    @property
    def is_favorite(self) -> bool:
        return FAVORITE_TAG in self.tags

    def set_score(self, display: float) -> None:
        """Stores a personal score. Out-of-range input is clamped, never rejected."""
        self.score = encode_score(display)

    def set_global_score(self, display: float) -> None:
        """Stores a catalog score. Out-of-range input is clamped, never rejected."""
        self.global_score = encode_score(display)

    def is_completed(self) -> bool:
        """
        True when the status is Completed, or when the progress is finished.

        Completion is inferred from progress for series and readables only:
        a movie is completed only through its status.
        """
        kind = self.kind
        if isinstance(kind, Movie):
            return kind.status is WatchStatus.COMPLETED
        if isinstance(kind, Series):
            return kind.status is WatchStatus.COMPLETED or kind.progress.is_finished()
        return kind.status is ReadStatus.COMPLETED or kind.progress.is_finished()

    def force_complete(self) -> None:
        """Marks the record as completed and fills its progress. Idempotent."""
        kind = self.kind
        if isinstance(kind, Movie):
            self.kind = replace(kind, status=WatchStatus.COMPLETED)
        elif isinstance(kind, Series):
            self.kind = replace(
                kind,
                status=WatchStatus.COMPLETED,
                progress=kind.progress.force_complete(),
            )
        else:
            self.kind = replace(
                kind,
                status=ReadStatus.COMPLETED,
                progress=kind.progress.force_complete(),
            )

    def update_progress(self, current: int, total: Optional[int] = None) -> Progress:
        """
        Updates the current count, and the total when one is given.

        Raises:
            NoProgressError: The record is a movie
            ValueError: A negative count was given
        """
        kind = self.kind
        if isinstance(kind, Movie):
            raise NoProgressError(f"'{self.title}' is a movie and has no progress")
        if total is None:
            progress = kind.progress.advance_to(current)
        else:
            progress = Progress(current=current, total=total)
        self.kind = replace(kind, progress=progress)
        return progress

    def add_tag(self, tag: str) -> bool:
        """Adds a tag. Returns False if it was already present."""
        tag = tag.strip()
        if not tag:
            raise ValueError("Tag cannot be empty")
        if tag in self.tags:
            return False
        self.tags.add(tag)
        return True

    def remove_tag(self, tag: str) -> bool:
        """Removes a tag. Returns False if it was not present."""
        tag = tag.strip()
        if tag not in self.tags:
            return False
        self.tags.discard(tag)
        return True

    def format_status(self) -> str:
        """Short label such as "Series [3/12] 25% (Watching)"."""
        kind = self.kind
        if isinstance(kind, Movie):
            return f"Movie ({kind.status.label})"
        name = "Series" if isinstance(kind, Series) else kind.readable_kind.label
        return f"{name} {format_progress(kind.progress)} ({kind.status.label})"


def format_progress(progress: Progress) -> str:
    """Formats a progress as "[current/total] pct%" ("?" for an unknown total)."""
    base = f"[{progress}]"
    pct = progress.percent()
    if pct is None:
        return base
    return f"{base} {pct:.0f}%"
