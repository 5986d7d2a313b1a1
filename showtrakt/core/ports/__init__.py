"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Port repository : Contrat de la base locale
- IShowRepository : Listing, mise a jour des statuts, reconciliation des saisons

Port client API : Contrat du service de metadonnees distant
- IShowDetailsClient : Consultation detaillee d'une serie
- ShowDetails : Metadonnees etendues d'une serie
- SeasonInfo : Description distante d'une saison
"""

from showtrakt.core.ports.api_clients import IShowDetailsClient, SeasonInfo, ShowDetails
from showtrakt.core.ports.repositories import IShowRepository

__all__ = [
    # Repositories
    "IShowRepository",
    # Clients API
    "IShowDetailsClient",
    "ShowDetails",
    "SeasonInfo",
]
