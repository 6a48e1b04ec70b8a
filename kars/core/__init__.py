"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et erreurs de mapping.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : MediaRecord et les variantes de type (Movie, Series, Readable)
- ports/ : Interfaces abstraites (repository, fournisseurs de recherche)
- value_objects/ : Objets valeur immutables (Progress, statuts, codec de note)
"""
