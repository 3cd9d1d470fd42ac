from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTS = Decimal("0.01")


def to_cents(value) -> Decimal:
    """Round a float amount to whole cents for display and export."""
    if value is None:
        raise ValueError("missing money value")

    try:
        amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError("invalid money value") from exc

    return amount


def format_money(value) -> str:
    amount = to_cents(value)
    if amount < 0:
        return f"-${-amount:,}"
    return f"${amount:,}"
