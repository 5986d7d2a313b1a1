"""
ShowTrakt - Suivi en terminal de la progression de visionnage des series TV.

Ce package combine une base locale SQLite (statuts utilisateur) et l'API Trakt
(metadonnees detaillees des series et de leurs saisons).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (gestionnaire de donnees en arriere-plan)
- adapters/ : Clients externes (API Trakt, datasets IMDb)
- infrastructure/ : Persistance SQLModel
- interface/ : Machine d'etat de l'application et plomberie terminal
"""

__version__ = "0.1.0"
