import base64
import json

from jwcrypto import jwk, jws

from jws2020_signer.canonical import normalize
from jws2020_signer.negotiate import negotiate
from jws2020_signer.payload import build_payload
from jws2020_signer.proof import bare_proof

CREATED = "2024-01-01T00:00:00.000Z"
VERIFICATION_METHOD = "did:example:issuer#key-1"


def decode_header(compact: str) -> dict:
    header = compact.split(".")[0]
    return json.loads(base64.urlsafe_b64decode(header + "=" * (-len(header) % 4)))


def verify_proof(signed: dict, public_key: jwk.JWK, loader, flavour) -> None:
    """Rebuild the payload of ``signed`` for ``flavour`` and check its jws.

    Raises jwcrypto's InvalidJWSSignature when the signature does not match.
    """
    document = {k: v for k, v in signed.items() if k != "proof"}
    proof = signed["proof"]
    credential_normalized = normalize(negotiate(document, loader), loader)
    proof_normalized = normalize(bare_proof(proof["verificationMethod"], proof["created"]), loader)
    payload = build_payload(flavour, proof_normalized, credential_normalized)

    token = jws.JWS()
    token.deserialize(proof["jws"])
    token.verify(public_key, detached_payload=payload)
