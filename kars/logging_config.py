"""
Configuration du logging de KARS via loguru.

Deux sorties, limitees aux messages du package kars :
- stderr : lisible et coloree (desactivable, par ex. sous une sortie Rich)
- fichier : une ligne JSON par message, avec rotation et compression
"""

import sys
from pathlib import Path

from loguru import logger

LOGGER_NAMESPACE = "kars"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/kars.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    console: bool = True,
) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum de la sortie console
        log_file : Fichier JSON (le repertoire parent est cree)
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers archives conserves
        console : Ajoute la sortie stderr si True
    """
    logger.remove()

    if console:
        logger.add(
            sys.stderr,
            level=log_level,
            format=CONSOLE_FORMAT,
            filter=LOGGER_NAMESPACE,
            colorize=True,
        )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les replis de mapping sont journalises en DEBUG
        filter=LOGGER_NAMESPACE,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(log_file),
        level=log_level,
        console=console,
    )
