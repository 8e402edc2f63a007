"""
Module de persistance SQLModel pour Guava.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, generateur de session, initialisation du schema
- models.py : Modeles SQLModel representant les tables du catalogue

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from guava.infrastructure.persistence.database import (
    create_catalog_engine,
    get_session,
    init_db,
)
from guava.infrastructure.persistence.models import ContentModel, PlaylistModel

__all__ = [
    "create_catalog_engine",
    "get_session",
    "init_db",
    "ContentModel",
    "PlaylistModel",
]
