"""Exceptions for metal Fresnel fitting."""


class MetalFresnelError(Exception):
    """Base exception for all metalfresnel errors."""

    pass


class DomainInputInvalid(MetalFresnelError, ValueError):
    """Input lies outside the domain where the reflectance math is defined.

    Raised for negative or non-finite optical constants, color tensors whose
    last dimension is not 3, and artist parameters that derive a negative
    k^2.
    """

    pass


class NoCandidateFound(MetalFresnelError, ValueError):
    """Grid search range is empty or malformed."""

    pass
