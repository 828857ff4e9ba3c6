"""Errors raised by the color core."""


class ColorParseError(ValueError):
    """No supported notation matched the input."""

    def __init__(self, input_str: str):
        self.input = input_str
        super().__init__(f"Invalid color format: '{input_str}'")
