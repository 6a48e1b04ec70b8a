"""
Tests unitaires pour le codec de note a virgule fixe.

Verifie:
- Mise a l'echelle x10 avec arrondi des demis loin de zero
- Bornage des valeurs hors plage (jamais de rejet)
- Aller-retour a 0.05 pres
"""

import math

import pytest

from kars.core.value_objects import decode_score, encode_score


class TestEncodeScore:
    """Tests pour encode_score."""

    @pytest.mark.parametrize(
        "display, stored",
        [
            (0.0, 0),
            (7.5, 75),
            (10.0, 100),
            (8.75, 88),
            (0.25, 3),
            (6.04, 60),
            (6.06, 61),
        ],
    )
    def test_scales_and_rounds_half_away_from_zero(self, display: float, stored: int) -> None:
        """Les valeurs sont multipliees par 10 puis arrondies au plus proche."""
        assert encode_score(display) == stored

    def test_clamps_above_maximum(self) -> None:
        """Une note superieure a 10 est bornee a 100."""
        assert encode_score(11.3) == 100
        assert encode_score(1e9) == 100

    def test_clamps_below_minimum(self) -> None:
        """Une note negative est bornee a 0."""
        assert encode_score(-2.0) == 0

    def test_nan_encodes_to_zero(self) -> None:
        """NaN est encode en 0, sans exception."""
        assert encode_score(math.nan) == 0

    def test_infinities_are_clamped(self) -> None:
        assert encode_score(math.inf) == 100
        assert encode_score(-math.inf) == 0


class TestDecodeScore:
    """Tests pour decode_score."""

    def test_divides_by_ten(self) -> None:
        assert decode_score(75) == 7.5
        assert decode_score(0) == 0.0
        assert decode_score(100) == 10.0

    @pytest.mark.parametrize("display", [0.0, 0.04, 3.33, 5.55, 7.49, 9.99, 10.0])
    def test_round_trip_within_half_step(self, display: float) -> None:
        """decode(encode(x)) reste a 0.05 de x dans la plage."""
        assert abs(decode_score(encode_score(display)) - display) <= 0.05 + 1e-9
