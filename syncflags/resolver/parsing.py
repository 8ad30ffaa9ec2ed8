"""Boolean parsing for stored config values."""

TRUE_VALUE = "true"


def parse_bool(value: str | None) -> bool:
    """Parse a stored value as a flag.

    Only the exact lowercase string "true" enables a flag. Anything else,
    including None, "false", "TRUE" and padded text, is False. Never raises.
    """
    return value == TRUE_VALUE
