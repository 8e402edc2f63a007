"""
Journalisation de Guava via loguru.

Deux sorties :
- stderr, coloree, avec le contexte passe en mots-cles (content_id, hash...)
- fichier JSON avec rotation, ou le contexte est conserve dans "extra"

Les echecs du store rapportes comme "not found" au client sont visibles
ici en ERROR avec leur cause.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _console_format(record) -> str:
    """Format console : le contexte en mots-cles est ajoute apres le message."""
    if record["extra"]:
        return CONSOLE_FORMAT + " <dim>{extra}</dim>\n{exception}"
    return CONSOLE_FORMAT + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/guava.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les sorties de log de Guava.

    Args :
        log_level : Niveau minimum de la sortie stderr
        log_file : Fichier JSON (None pour ne journaliser que sur stderr)
        rotation_size : Taille declenchant la rotation, ex. "10 MB"
        retention_count : Nombre d'archives conservees
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper(), format=_console_format, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        # Les handlers synchrones tournent dans le threadpool
        enqueue=True,
    )
    logger.debug("Journalisation installee", log_file=str(log_file), level=log_level)
