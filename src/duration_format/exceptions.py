"""Domain exceptions for duration-format."""


class ArgumentError(TypeError):
    """Raised when format_duration is called without a duration argument."""

    pass
