"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les erreurs.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (Show, Season) et statuts utilisateur
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
"""
