"""
Couche adaptateurs.

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Client de l'API Trakt (details des series et saisons)
- imdb/ : Import des series depuis les datasets publics IMDb

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
