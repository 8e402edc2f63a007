"""
Interface port pour le stockage des assets.

Les assets sont adresses par leur hash : le hash est le chemin relatif
du fichier sous la racine des assets.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Iterator


class IAssetStore(ABC):
    """
    Interface de localisation et d'ouverture des assets.

    Toute defaillance (hash invalide, fichier absent, permission refusee,
    erreur d'E/S) est signalee par une unique AssetNotFoundError.
    """

    @abstractmethod
    def locate(self, file_hash: str) -> Path:
        """
        Resout le chemin physique d'un asset existant.

        Args :
            file_hash : Hash de stockage de l'asset

        Retourne :
            Chemin du fichier sous la racine des assets

        Raises :
            AssetNotFoundError : Si le hash est invalide ou le fichier absent
        """
        ...

    @abstractmethod
    def open(self, file_hash: str) -> BinaryIO:
        """
        Ouvre un asset en lecture binaire.

        Le flux retourne est consomme une seule fois puis ferme par l'appelant.

        Raises :
            AssetNotFoundError : Si l'asset ne peut pas etre ouvert
        """
        ...

    @abstractmethod
    def iter_hashes(self) -> Iterator[str]:
        """Parcourt les hashes des fichiers presents a la racine des assets."""
        ...
