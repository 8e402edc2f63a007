"""
Couche adaptateurs.

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

- file_system.py : Stockage des assets adresses par hash sur le systeme de fichiers

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from guava.adapters.file_system import FileSystemAssetStore

__all__ = [
    "FileSystemAssetStore",
]
