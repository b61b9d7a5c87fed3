class GeohashError(ValueError):
    """Base class for errors raised by geocell."""


class InvalidArgument(GeohashError):
    """A coordinate or precision passed to the encoder is out of range."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r}")


class InvalidCharacter(GeohashError):
    """A geohash contains a character outside the base32 alphabet."""

    def __init__(self, char: str, position: int = -1, geohash: str = ""):
        self.char = char
        self.position = position
        self.geohash = geohash
        if position >= 0:
            message = f"Invalid character {char!r} at position {position} in geohash {geohash!r}"
        else:
            message = f"Invalid character {char!r}"
        super().__init__(message)
