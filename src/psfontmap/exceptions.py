"""Custom exceptions for psfontmap."""


class FontMapError(Exception):
    """Base exception for all psfontmap errors."""


class NormalizationUnavailable(FontMapError):
    """Font family could not be normalized by the font database."""


class InvalidRequest(FontMapError, ValueError):
    """Font request is malformed (bad family, pitch or tuple shape)."""
