"""Pure functions for converting environment strings to typed values."""


def string_to_boolean(value: str | bool) -> bool:
    """Convert string to boolean value.

    Case-insensitive. If input is already boolean, returns it unchanged.

    Supported true values: 'yes', 'true', 't', 'y', '1'
    Supported false values: 'no', 'false', 'f', 'n', '0'

    Raises:
        ValueError: If string cannot be converted to boolean

    Examples:
        >>> string_to_boolean('yes')
        True
        >>> string_to_boolean(' NO ')
        False
        >>> string_to_boolean('maybe')
        Traceback (most recent call last):
        ...
        ValueError: Boolean value expected (True/False), got: maybe
    """
    if isinstance(value, bool):
        return value

    value_lower = value.strip().lower()

    if value_lower in ("yes", "true", "t", "y", "1"):
        return True
    elif value_lower in ("no", "false", "f", "n", "0"):
        return False
    else:
        raise ValueError(f"Boolean value expected (True/False), got: {value}")

