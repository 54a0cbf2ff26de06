"""JsonWebSignature2020 proofs for JSON-LD credentials and presentations."""

from jws2020_signer.config import Settings
from jws2020_signer.errors import (
    CanonicalizationError,
    ContextResolutionError,
    Jws2020Error,
    KeyImportError,
    SigningError,
    UnsupportedKeyError,
)
from jws2020_signer.keys import get_alg, normalize_key
from jws2020_signer.loader import build_document_loader
from jws2020_signer.models import Flavour, JsonWebSignature2020Proof
from jws2020_signer.proof import add_proof, asign_credential, get_proof, sign_credential

__all__ = [
    "CanonicalizationError",
    "ContextResolutionError",
    "Flavour",
    "Jws2020Error",
    "JsonWebSignature2020Proof",
    "KeyImportError",
    "Settings",
    "SigningError",
    "UnsupportedKeyError",
    "add_proof",
    "asign_credential",
    "build_document_loader",
    "get_alg",
    "get_proof",
    "normalize_key",
    "sign_credential",
]

__version__ = "0.1.0"
