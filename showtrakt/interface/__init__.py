"""
Interface terminal de ShowTrakt.

- app.py : Machine d'etat de l'application (mode, selections, listes)
- events.py : Ticks et touches clavier
- handler.py : Raccourcis clavier
- ui.py : Rendu Rich
- tui.py : Boucle interactive
"""

from showtrakt.interface.app import App, AppMode

__all__ = ["App", "AppMode"]
