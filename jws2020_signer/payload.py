"""Bytes handed to the signer, one builder per :class:`Flavour`.

The two flavours are not interchangeable: Specification signs 64 raw digest
bytes, Gaia-X signs 64 ASCII hex characters. A verifier has to know which
one was used to rebuild the same payload.
"""

from jws2020_signer.hashing import hex_encode, sha256
from jws2020_signer.models import Flavour


def specification_payload(proof_normalized: str, credential_normalized: str) -> bytes:
    return sha256(proof_normalized) + sha256(credential_normalized)


def gaiax_payload(proof_normalized: str, credential_normalized: str) -> bytes:
    # Only the document is bound, the proof options are not.
    return hex_encode(sha256(credential_normalized)).encode("utf-8")


PAYLOAD_BUILDERS = {
    Flavour.SPECIFICATION: specification_payload,
    Flavour.GAIA_X: gaiax_payload,
}


def build_payload(flavour: Flavour, proof_normalized: str, credential_normalized: str) -> bytes:
    return PAYLOAD_BUILDERS[Flavour(flavour)](proof_normalized, credential_normalized)
