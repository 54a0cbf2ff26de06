"""Error kinds raised by the signing pipeline.

Every failure aborts the whole call. Errors coming from PyLD or jwcrypto are
re-raised as one of these with the original exception chained as the cause.
"""


class Jws2020Error(Exception):
    """Base class for all signing errors."""

    def __init__(self, message: str = "Signing failed") -> None:
        self.message = message
        super().__init__(message)


class ContextResolutionError(Jws2020Error):
    """The document's JSON-LD context or type could not be resolved."""


class CanonicalizationError(Jws2020Error):
    """URDNA2015 normalization of a document failed."""


class KeyImportError(Jws2020Error):
    """Key material is malformed or of a type that cannot be imported."""


class UnsupportedKeyError(Jws2020Error):
    """The key's type/curve has no JsonWebSignature2020 algorithm."""

    def __init__(self, kty=None, crv=None, message=None) -> None:
        self.kty = kty
        self.crv = crv
        super().__init__(message or f"Can't determine alg for kty {kty} and crv {crv}")


class SigningError(Jws2020Error):
    """The signature primitive failed."""
