"""Detached JWS with an unencoded payload (RFC 7797).

The payload bytes are signed as they are and left out of the compact
serialization, so the result looks like ``<protected>..<signature>``.
"""

import logging
from collections.abc import Mapping

from jwcrypto import jws
from jwcrypto.common import JWException

from jws2020_signer.errors import SigningError
from jws2020_signer.keys import get_alg, import_key

logger = logging.getLogger(__name__)


def protected_header(alg: str) -> dict:
    return {"alg": alg, "b64": False, "crit": ["b64"]}


def sign(key: Mapping, payload: bytes) -> str:
    alg = get_alg(key)
    signing_key = import_key(key)

    try:
        token = jws.JWS(payload)
        token.allowed_algs = [alg]
        token.add_signature(signing_key, alg=alg, protected=protected_header(alg))
        token.detach_payload()
        signed = token.serialize(compact=True)
    except (JWException, ValueError, TypeError) as e:
        raise SigningError(f"Failed to sign payload with {alg}: {e}") from e

    logger.debug("Signed %d byte payload with %s", len(payload), alg)
    return signed
