"""
KARS - Archive personnelle de medias (films, series, animes, lectures).

Ce package suit la consommation de medias d'un utilisateur : statut,
progression et notes, avec import depuis des catalogues externes.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (cas d'utilisation)
- adapters/ : Clients API externes et CLI
- infrastructure/ : Persistance SQLite
- web/ : API JSON FastAPI
"""
