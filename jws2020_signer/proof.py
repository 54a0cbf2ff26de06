"""Sign JSON-LD credentials and presentations with a JsonWebSignature2020 proof.

The pipeline is linear and runs once per call:

    drop prior proof -> negotiate type/contexts -> canonicalize document
    -> canonicalize bare proof -> build payload (flavour) -> adapt key
    -> sign -> attach proof

Any failing step aborts the call, the caller's document is never modified.
"""

import asyncio
import logging
from collections.abc import Mapping
from datetime import datetime, timezone

from jws2020_signer import jws
from jws2020_signer.canonical import normalize
from jws2020_signer.config import Settings
from jws2020_signer.errors import ContextResolutionError
from jws2020_signer.keys import normalize_key
from jws2020_signer.loader import CREDENTIALS_CONTEXT, JWS_2020_CONTEXT, build_document_loader
from jws2020_signer.models import JsonWebSignature2020Proof, SignOptions
from jws2020_signer.negotiate import negotiate
from jws2020_signer.payload import build_payload

logger = logging.getLogger(__name__)

PROOF_CONTEXTS = [CREDENTIALS_CONTEXT, JWS_2020_CONTEXT]


def now_iso() -> str:
    """Current UTC time as e.g. ``2024-05-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_proof(verification_method: str, jws_value: str, created: str) -> dict:
    return JsonWebSignature2020Proof(
        created=created, verification_method=verification_method, jws=jws_value
    ).to_jsonld()


def add_proof(document: Mapping, verification_method: str, jws_value: str, created: str) -> dict:
    return {**document, "proof": get_proof(verification_method, jws_value, created)}


def bare_proof(verification_method: str, created: str) -> dict:
    """The proof options that get canonicalized: no ``jws``, standard contexts."""
    proof = get_proof(verification_method, "", created)
    del proof["jws"]
    return {"@context": list(PROOF_CONTEXTS), **proof}


def sign_credential(
    key,
    verification_method: str,
    document: Mapping,
    flavour=None,
    created=None,
    document_loader=None,
) -> dict:
    """Return a copy of ``document`` carrying a JsonWebSignature2020 proof.

    ``key`` is a JWK dict, a ``jwcrypto.jwk.JWK`` or PEM text. ``flavour``
    defaults to ``Settings().default_flavour`` and ``created`` to the current
    time; pinning ``created`` makes the result reproducible for EdDSA keys.
    """
    if not isinstance(document, Mapping):
        raise ContextResolutionError("Document must be a JSON object")

    if flavour is None:
        flavour = Settings().default_flavour
    options = SignOptions(flavour=flavour, created=created if created is not None else now_iso())
    if document_loader is None:
        document_loader = build_document_loader()

    # Create copy and drop potentially existing proof
    credential = dict(document)
    credential.pop("proof", None)

    credential = negotiate(credential, document_loader)
    credential_normalized = normalize(credential, document_loader)

    proof_normalized = normalize(bare_proof(verification_method, options.created), document_loader)

    payload = build_payload(options.flavour, proof_normalized, credential_normalized)

    signing_key = normalize_key(key)
    logger.debug(
        "Signing %s for %s (flavour %s)",
        credential.get("id", "document"),
        verification_method,
        options.flavour.value,
    )
    credential_jws = jws.sign(signing_key, payload)

    return add_proof(credential, verification_method, credential_jws, options.created)


async def asign_credential(
    key,
    verification_method: str,
    document: Mapping,
    flavour=None,
    created=None,
    document_loader=None,
) -> dict:
    """Run :func:`sign_credential` in a worker thread."""
    return await asyncio.to_thread(
        sign_credential,
        key,
        verification_method,
        document,
        flavour=flavour,
        created=created,
        document_loader=document_loader,
    )
