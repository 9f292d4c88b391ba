"""Console formatting helpers shared by the demos."""


def format_currency(amount: float) -> str:
    """Format an amount the way en-US currency is displayed, e.g. $1,234.50."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
