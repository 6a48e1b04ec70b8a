"""
Fixtures pytest partagees pour les tests KARS.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine et session SQLite en memoire (table media_items creee)
- Medias d'exemple pour chaque variante
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from kars.config import Settings
from kars.core.entities.media import MediaRecord, Movie, Readable, Series
from kars.core.value_objects import (
    Progress,
    ReadableKind,
    ReadStatus,
    WatchStatus,
)
from kars.infrastructure.persistence.database import create_db_engine, init_db


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec la table media_items."""
    engine = init_db(create_db_engine("sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def movie_record() -> MediaRecord:
    """Film termine, note 8.5, marque favori."""
    record = MediaRecord.new("Inception", Movie(status=WatchStatus.COMPLETED))
    record.set_score(8.5)
    record.external_id = 27205
    record.source = "tmdb"
    record.tags = {"favorite", "nolan"}
    return record


@pytest.fixture
def anime_record() -> MediaRecord:
    """Serie AniList en cours, 12/25 episodes."""
    record = MediaRecord.new(
        "Attack on Titan",
        Series(progress=Progress(current=12, total=25), status=WatchStatus.WATCHING),
    )
    record.global_score = 84
    record.external_id = 16498
    record.source = "anilist"
    record.poster_url = "https://s4.anilist.co/file/anilistcdn/media/anime/cover/large/bx16498.jpg"
    return record


@pytest.fixture
def manga_record() -> MediaRecord:
    """Manga en cours sans total connu."""
    return MediaRecord.new(
        "One Piece",
        Readable(
            readable_kind=ReadableKind.MANGA,
            progress=Progress(current=40, total=None),
            status=ReadStatus.READING,
        ),
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base, le cache et les logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'kars.db'}",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "kars.log",
        tmdb_api_key=None,
    )
