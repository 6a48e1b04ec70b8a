"""
Codec de note a virgule fixe.

Une note affichee de 0.0 a 10.0 (une decimale) est stockee sur un octet
de 0 a 100. L'encodage borne la valeur au lieu de la rejeter.
"""

import math

SCORE_MIN = 0.0
SCORE_MAX = 10.0
SCORE_SCALE = 10


def encode_score(display: float) -> int:
    """
    Encode une note d'affichage (0.0-10.0) en entier stocke (0-100).

    La valeur est bornee a [0.0, 10.0], multipliee par 10 puis arrondie
    au plus proche, les demis s'eloignant de zero (2.5 -> 3).
    Une valeur NaN est encodee en 0.

    Args :
        display : Note saisie par l'utilisateur ou fournie par un catalogue

    Retourne :
        Entier entre 0 et 100
    """
    if math.isnan(display):
        return 0
    clamped = min(max(display, SCORE_MIN), SCORE_MAX)
    return int(math.floor(clamped * SCORE_SCALE + 0.5))


def decode_score(stored: int) -> float:
    """Decode une note stockee (0-100) en note d'affichage (0.0-10.0)."""
    return stored / float(SCORE_SCALE)
