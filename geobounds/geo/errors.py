"""Errors raised by the geometry kernel."""


class GeoError(Exception):
    """Base class for kernel errors."""

    kind = "geo"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DomainError(GeoError):
    """An input lies outside its valid range or is not a finite number."""

    kind = "domain"


class DegenerateGeometryError(GeoError):
    """
    A valid input whose bounding box cannot be expressed as a
    non-wrapping rectangle (pole proximity, polar cap, antimeridian).
    """

    kind = "degenerate"
