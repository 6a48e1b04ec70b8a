"""
Couche adaptateurs.

Les adaptateurs implementent les ports definis dans core/ports/ :
- api/ : Clients des catalogues externes (AniList, TMDB, MangaDex, Open Library)
- cli/ : Utilitaires de la ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
