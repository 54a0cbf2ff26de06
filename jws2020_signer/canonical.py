"""JSON-LD expansion and URDNA2015 canonicalization through PyLD."""

from pyld import jsonld

from jws2020_signer.errors import CanonicalizationError, ContextResolutionError


def expand(document, document_loader) -> list:
    try:
        return jsonld.expand(document, {"documentLoader": document_loader})
    except jsonld.JsonLdError as e:
        raise ContextResolutionError(f"Failed to expand JSON-LD document: {e}") from e


def normalize(document, document_loader) -> str:
    """Return the canonical N-Quads of ``document``.

    Documents describing the same RDF dataset give byte-identical output,
    whatever the key or node order in the JSON.
    """
    try:
        return jsonld.normalize(
            document,
            {
                "algorithm": "URDNA2015",
                "format": "application/n-quads",
                "documentLoader": document_loader,
            },
        )
    except jsonld.JsonLdError as e:
        raise CanonicalizationError(f"Failed to canonicalize JSON-LD document: {e}") from e
