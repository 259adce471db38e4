"""Human-readable rendering of distances."""

from decimal import ROUND_HALF_UP, Decimal

_WHOLE = Decimal("1")
_TENTH = Decimal("0.1")


def format_distance(distance_meters: float) -> str:
    """
    Render a distance for display, choosing meters or kilometers.

    Below 1 000 m the value is shown in whole meters, otherwise in km with
    one decimal.  Rounding is half away from zero on the shortest decimal
    form of the float, so ``1250`` gives ``"1.3 km"`` and ``499.5`` gives
    ``"500 m"``.
    """
    value = Decimal(str(distance_meters))
    if distance_meters < 1000:
        return f"{value.quantize(_WHOLE, rounding=ROUND_HALF_UP)} m"
    km = (value / 1000).quantize(_TENTH, rounding=ROUND_HALF_UP)
    return f"{km} km"
