"""
Couche domaine (core).

Contient les entites du catalogue, les ports (interfaces abstraites) et les erreurs.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites du catalogue (ContentType, ContentEntry, ContentRecord, Playlist)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- errors.py : Hierarchie d'erreurs du catalogue
"""
