"""
Couche infrastructure de Guava.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Store de documents avec SQLModel (modeles et repositories)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer le store (ex: SQLite au lieu de PostgreSQL)
sans modifier la logique metier.
"""
