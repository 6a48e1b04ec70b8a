"""
Erreurs de mapping entre le modele de domaine et ses representations plates.

Deux frontieres, deux politiques :
- Frontiere fil (API JSON) : un identifiant ou un type inconnu rejette la requete.
  Un statut inconnu n'est PAS une erreur (repli sur l'etat "plan").
- Frontiere persistance (lignes SQL) : un type ou un identifiant invalide
  signale une corruption, et le chargement complet est interrompu.
  Des tags JSON illisibles ne sont PAS une erreur (ensemble vide).
"""


class MappingError(Exception):
    """Erreur de base pour toute conversion domaine <-> representation plate."""


class InvalidIdentifier(MappingError):
    """
    Identifiant non vide qui n'est pas un UUID valide (frontiere fil).

    Attributes:
        value: La chaine recue
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid UUID: {value!r}")


class UnknownMediaType(MappingError):
    """
    Type de media inconnu recu sur le fil.

    Attributes:
        value: Le type recu (ex: "dvd")
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown media_type: {value}")


class DataCorruption(MappingError):
    """
    Ligne persistee impossible a reconstruire (type inconnu, id invalide).

    Attributes:
        detail: Description de la valeur fautive
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Data corruption: {detail}")
