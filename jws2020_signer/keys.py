import logging
from collections.abc import Mapping

from cryptography.exceptions import UnsupportedAlgorithm
from jwcrypto import jwk
from jwcrypto.common import JWException

from jws2020_signer.errors import KeyImportError, UnsupportedKeyError

logger = logging.getLogger(__name__)

# https://www.w3.org/community/reports/credentials/CG-FINAL-lds-jws2020-20220721/#jose-conformance
# RSA keys have no curve, so they are looked up with crv None.
ALGORITHMS = {
    ("OKP", "Ed25519"): "EdDSA",
    ("EC", "secp256k1"): "ES256K",
    ("EC", "P-256"): "ES256",
    ("EC", "P-384"): "ES384",
    ("RSA", None): "PS256",
}

PEM_MARKER = b"-----BEGIN"


def parse_pem_key(pem) -> dict:
    """Decode a PEM private key, public key or certificate into a JWK dict."""
    if isinstance(pem, str):
        pem = pem.encode("utf-8")
    try:
        key = jwk.JWK.from_pem(pem)
    except (ValueError, TypeError, UnsupportedAlgorithm, JWException) as e:
        raise KeyImportError(f"Failed to import PEM key: {e}") from e
    exported = key.export(private_key=key.has_private, as_dict=True)
    logger.debug("Imported %s key from PEM", exported.get("kty"))
    return exported


def normalize_key(key) -> dict:
    """Turn any accepted form of key material into a JWK dict.

    Accepts a JWK mapping, a ``jwcrypto.jwk.JWK`` or PEM text/bytes. The
    caller's object is never modified.
    """
    if isinstance(key, jwk.JWK):
        return key.export(private_key=key.has_private, as_dict=True)
    if isinstance(key, Mapping):
        return dict(key)
    if isinstance(key, str):
        return parse_pem_key(key)
    if isinstance(key, (bytes, bytearray)):
        if bytes(key).lstrip().startswith(PEM_MARKER):
            return parse_pem_key(bytes(key))
        raise UnsupportedKeyError(message="Can't determine alg from raw key bytes")
    raise KeyImportError(f"Unsupported key material of type {type(key).__name__}")


def get_alg(key: Mapping) -> str:
    kty = key.get("kty")
    crv = key.get("crv")
    alg = ALGORITHMS.get((kty, None if kty == "RSA" else crv))
    if alg is None:
        raise UnsupportedKeyError(kty, crv)
    return alg


def import_key(key: Mapping) -> jwk.JWK:
    try:
        return jwk.JWK(**key)
    except (ValueError, TypeError, JWException) as e:
        raise KeyImportError(f"Invalid JWK: {e}") from e
