"""
Adaptateur de stockage des assets sur le systeme de fichiers.

Implementation concrete de IAssetStore : le chemin physique d'un asset est
la racine des assets jointe a son hash. Le hash est un segment de chemin
unique ; tout hash qui pourrait sortir de la racine est refuse.
"""

import os
from pathlib import Path
from typing import BinaryIO, Iterator

from loguru import logger

from guava.core.errors import AssetNotFoundError
from guava.core.ports.file_system import IAssetStore

# Caracteres interdits dans un hash (separateurs de chemin et octet nul)
FORBIDDEN_HASH_CHARS: frozenset[str] = frozenset({"/", "\\", "\x00"})


def is_valid_hash(file_hash: str) -> bool:
    """
    Verifie qu'un hash est utilisable comme segment de chemin.

    Refuse le hash vide, "." et "..", ainsi que tout hash contenant
    un separateur de chemin ou un octet nul.
    """
    if not file_hash or file_hash in {".", ".."}:
        return False
    return not any(char in FORBIDDEN_HASH_CHARS for char in file_hash)


class FileSystemAssetStore(IAssetStore):
    """
    Implementation de IAssetStore pour le systeme de fichiers reel.

    Politique : hash invalide, fichier absent, permission refusee et erreur d'E/S
    sont tous rapportes par AssetNotFoundError. La cause reelle est journalisee.
    """

    def __init__(self, root: Path) -> None:
        """
        Initialise le store avec la racine des assets.

        Args :
            root : Repertoire contenant les assets nommes par leur hash
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Racine des assets."""
        return self._root

    def _path_for(self, file_hash: str) -> Path:
        """Calcule le chemin d'un asset, en verifiant qu'il reste sous la racine."""
        if not is_valid_hash(file_hash):
            logger.warning("Hash d'asset refuse", file_hash=repr(file_hash))
            raise AssetNotFoundError(f"Hash invalide: {file_hash!r}")

        path = self._root / file_hash
        try:
            root = self._root.resolve()
            resolved = path.resolve()
        except (OSError, RuntimeError) as exc:
            # RuntimeError : boucle de liens symboliques avant Python 3.13
            logger.error(
                "Resolution de l'asset impossible, rapporte comme absent",
                file_hash=file_hash,
                error=str(exc),
            )
            raise AssetNotFoundError(f"Resolution impossible: {path}: {exc}") from exc

        if not resolved.is_relative_to(root):
            # Lien symbolique pointant hors de la racine
            logger.warning("Asset hors de la racine", file_hash=file_hash, root=str(root))
            raise AssetNotFoundError(f"Asset hors de la racine: {file_hash!r}")
        return path

    def locate(self, file_hash: str) -> Path:
        """
        Resout le chemin physique d'un asset existant.

        Toute erreur de stat (nom trop long, racine non traversable, E/S)
        est rapportee comme un asset absent.
        """
        path = self._path_for(file_hash)
        try:
            is_file = path.is_file()
        except OSError as exc:
            logger.error(
                "Acces a l'asset impossible, rapporte comme absent",
                file_hash=file_hash,
                error=str(exc),
            )
            raise AssetNotFoundError(f"Acces impossible: {path}: {exc}") from exc

        if not is_file:
            logger.info("Asset absent", file_hash=file_hash, path=str(path))
            raise AssetNotFoundError(f"Asset absent: {path}")
        return path

    def open(self, file_hash: str) -> BinaryIO:
        """
        Ouvre un asset en lecture binaire.

        Le fichier est ouvert avant le debut de la reponse HTTP, de sorte
        qu'un echec d'ouverture produit encore une reponse 404.
        """
        path = self.locate(file_hash)
        try:
            return open(path, "rb")
        except OSError as exc:
            logger.error(
                "Ouverture de l'asset impossible, rapporte comme absent",
                file_hash=file_hash,
                error=str(exc),
            )
            raise AssetNotFoundError(f"Ouverture impossible: {path}: {exc}") from exc

    def iter_hashes(self) -> Iterator[str]:
        """Parcourt les noms des fichiers reguliers a la racine des assets."""
        if not self._root.is_dir():
            return
        with os.scandir(self._root) as entries:
            for entry in entries:
                if entry.is_file():
                    yield entry.name
