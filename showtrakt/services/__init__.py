"""
Couche application de ShowTrakt.

- DataManager : worker d'arriere-plan qui repond aux requetes de listing
  de la boucle interactive
"""

from showtrakt.services.data_manager import DataManager

__all__ = ["DataManager"]
