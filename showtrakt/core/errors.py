"""
Erreurs du domaine ShowTrakt.

- InitError : le gestionnaire de donnees ne peut pas demarrer (fatal)
- DataManagerUnavailable : le worker du gestionnaire de donnees a disparu
- ApiError : echec d'une consultation de details sur l'API distante
- StoreError : echec de persistance dans la base locale
"""


class ShowTraktError(Exception):
    """Erreur de base de l'application."""


class InitError(ShowTraktError):
    """Le worker du DataManager ou sa connexion a la base n'a pas pu etre etabli."""


class DataManagerUnavailable(ShowTraktError):
    """Le worker du DataManager s'est arrete au lieu de repondre."""


class ApiError(ShowTraktError):
    """
    Echec d'une requete vers l'API de metadonnees.

    Attributes:
        imdb_id: ID de la serie concernee (si connue)
    """

    def __init__(self, message: str, imdb_id: str | None = None) -> None:
        self.imdb_id = imdb_id
        super().__init__(message)


class StoreError(ShowTraktError):
    """Echec d'une operation sur la base locale."""
