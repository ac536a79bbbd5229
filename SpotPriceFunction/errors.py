class SpotPriceError(Exception):
    """Base class for failures while building the spot price response."""


class UpstreamError(SpotPriceError):
    """The dataset API could not be reached or answered with an error status."""


class DecodeError(SpotPriceError):
    """The dataset API answered with a body we could not decode."""


class ParseError(SpotPriceError):
    """A record carried a timestamp that is not in the expected format."""
