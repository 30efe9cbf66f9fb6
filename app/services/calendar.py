"""
Month labels for the monthly applications chart.
"""

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_month(year: int, month: int) -> str:
    """
    Format a (year, month) bucket as "Mon YYYY", e.g. (2024, 1) -> "Jan 2024".

    Args:
        year: Four digit year
        month: Month number as returned by SQL EXTRACT (1 = January)

    Raises:
        ValueError: If month is outside 1..12
    """
    year = int(year)
    month = int(month)
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")

    # SQL months are 1-based, the name table is 0-based
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"
