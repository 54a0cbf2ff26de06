import hashlib

import pytest

from jws2020_signer.hashing import hex_encode, sha256
from jws2020_signer.models import Flavour
from jws2020_signer.payload import build_payload, gaiax_payload, specification_payload

PROOF = '_:c14n0 <http://purl.org/dc/terms/created> "2024-01-01T00:00:00.000Z" .\n'
DOCUMENT = '<did:example:1> <https://example.org/name> "Alice" .\n'


def test_sha256_accepts_text_and_bytes() -> None:
    assert sha256(DOCUMENT) == sha256(DOCUMENT.encode("utf-8"))
    assert len(sha256(DOCUMENT)) == 32


def test_hex_encode_is_lowercase() -> None:
    assert hex_encode(b"\xab\xcd") == "abcd"


def test_specification_payload_is_proof_digest_then_document_digest() -> None:
    payload = specification_payload(PROOF, DOCUMENT)
    assert len(payload) == 64
    assert payload[:32] == hashlib.sha256(PROOF.encode()).digest()
    assert payload[32:] == hashlib.sha256(DOCUMENT.encode()).digest()


def test_gaiax_payload_is_hex_text_of_document_digest() -> None:
    payload = gaiax_payload(PROOF, DOCUMENT)
    assert payload == hashlib.sha256(DOCUMENT.encode()).hexdigest().encode("ascii")
    assert gaiax_payload("anything else", DOCUMENT) == payload


def test_flavours_build_different_payloads() -> None:
    assert build_payload(Flavour.SPECIFICATION, PROOF, DOCUMENT) != build_payload(
        Flavour.GAIA_X, PROOF, DOCUMENT
    )


def test_build_payload_accepts_flavour_value() -> None:
    assert build_payload("Gaia-X", PROOF, DOCUMENT) == gaiax_payload(PROOF, DOCUMENT)


def test_build_payload_rejects_unknown_flavour() -> None:
    with pytest.raises(ValueError):
        build_payload("Legacy", PROOF, DOCUMENT)
