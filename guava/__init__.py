"""
Guava - Service de catalogue multimedia.

Ce package expose des playlists (collections ordonnees de references de contenu)
et resout chaque reference vers un fichier audio/video adresse par son hash.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (resolution de contenu, playlists)
- adapters/ : Acces au systeme de fichiers des assets
- infrastructure/ : Persistance SQLModel
- web/ : API HTTP FastAPI et enveloppe de reponse
"""

__version__ = "0.1.0"
