"""Errors raised while decoding a serialized grid."""


class GridDecodeError(ValueError):
    """Serialized grid data could not be turned back into a grid."""


class TooManyElements(GridDecodeError):
    """More than width*height values were supplied."""

    def __init__(self, width: int, height: int):
        super().__init__(f"too many elements specified for {width}x{height} grid")
        self.width = width
        self.height = height


class NotEnoughElements(GridDecodeError):
    """Input ended before width*height values were read."""

    def __init__(self, width: int, height: int, received: int):
        super().__init__(
            f"not enough elements specified for {width}x{height} grid "
            f"(got {received}, expected {width * height})"
        )
        self.width = width
        self.height = height
        self.received = received


class InvalidElement(GridDecodeError):
    """A value in the sequence is not a boolean."""

    def __init__(self, index: int, value):
        super().__init__(f"expected sequence of bool, element {index} is {value!r}")
        self.index = index
        self.value = value
