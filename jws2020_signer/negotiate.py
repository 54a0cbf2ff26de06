"""Make sure a document can carry a JsonWebSignature2020 proof.

Documents that expand to neither a credential nor a presentation are turned
into credentials, and the credentials and JWS 2020 contexts are appended
when the existing context does not already define the terms they provide.
"""

import logging
from typing import NamedTuple

from jws2020_signer.canonical import expand
from jws2020_signer.errors import ContextResolutionError
from jws2020_signer.loader import CREDENTIALS_CONTEXT, JWS_2020_CONTEXT

logger = logging.getLogger(__name__)

SIGNATURE_TYPE = "https://w3id.org/security#JsonWebSignature2020"
CREDENTIAL_TYPE = "https://www.w3.org/2018/credentials#VerifiableCredential"
PRESENTATION_TYPE = "https://www.w3.org/2018/credentials#VerifiablePresentation"

# (compact term, IRI it must expand to)
CHECKED_TERMS = (
    ("JsonWebSignature2020", SIGNATURE_TYPE),
    ("VerifiableCredential", CREDENTIAL_TYPE),
    ("VerifiablePresentation", PRESENTATION_TYPE),
    ("type", "@type"),
)


class ContextCoverage(NamedTuple):
    signature: bool
    credential: bool
    presentation: bool
    type: bool


def as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def expanded_types(document, document_loader) -> list:
    expanded = expand(document, document_loader)
    if not expanded:
        return []
    return as_list(expanded[0].get("@type"))


def check_context(context, document_loader) -> ContextCoverage:
    """Check which of the checked terms the context already resolves.

    A single stub carrying the context and all compact terms as types is
    expanded, and each term is looked up among the resulting IRIs.
    """
    stub = {"@context": context, "@type": [compact for compact, _ in CHECKED_TERMS]}
    types = expanded_types(stub, document_loader)
    return ContextCoverage(*(iri in types for _, iri in CHECKED_TERMS))


def with_credential_type(document: dict) -> dict:
    document = dict(document)
    types = as_list(document.get("type", document.get("@type")))
    document["type"] = types + ["VerifiableCredential"]
    document.pop("@type", None)
    return document


def negotiate(document: dict, document_loader) -> dict:
    """Return a copy of ``document`` with the type and contexts a proof needs."""
    if document.get("@context") is None:
        raise ContextResolutionError("Document has no @context")

    types = expanded_types(document, document_loader)
    is_credential = CREDENTIAL_TYPE in types
    is_presentation = PRESENTATION_TYPE in types
    if not is_credential and not is_presentation:
        document = with_credential_type(document)
        is_credential = True

    coverage = check_context(document["@context"], document_loader)
    contexts = as_list(document["@context"])
    if not coverage.signature:
        contexts.append(JWS_2020_CONTEXT)
    if (
        (is_credential and not coverage.credential)
        or (is_presentation and not coverage.presentation)
        or not coverage.type
    ):
        contexts.append(CREDENTIALS_CONTEXT)

    logger.debug(
        "Negotiated document: credential=%s presentation=%s contexts=%s",
        is_credential,
        is_presentation,
        contexts,
    )
    return {**document, "@context": contexts}
