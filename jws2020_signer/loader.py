"""Document loader handing JSON-LD contexts to PyLD.

The contexts this signer appends itself ship with the package, so signing a
document that only uses them never touches the network. Anything else is
fetched with httpx, unless remote loading is switched off.
"""

import json
import logging
from pathlib import Path

import httpx
from pyld import jsonld

from jws2020_signer.config import Settings

logger = logging.getLogger(__name__)

CREDENTIALS_CONTEXT = "https://www.w3.org/2018/credentials/v1"
JWS_2020_CONTEXT = "https://w3id.org/security/suites/jws-2020/v1"

# URL -> file under contexts/
BUNDLED_CONTEXTS = {
    CREDENTIALS_CONTEXT: "credentials-v1.jsonld",
    JWS_2020_CONTEXT: "jws-2020-v1.jsonld",
}

CONTEXTS_DIR = Path(__file__).parent / "contexts"


def _remote_document(url, document):
    return {
        "contentType": "application/ld+json",
        "contextUrl": None,
        "documentUrl": url,
        "document": document,
    }


def load_bundled_context(url):
    with open(CONTEXTS_DIR / BUNDLED_CONTEXTS[url], "r", encoding="utf-8") as f:
        return json.load(f)


def fetch_remote_context(url, timeout=10.0):
    headers = {"Accept": "application/ld+json, application/json;q=0.9"}
    logger.debug("Fetching remote JSON-LD context %s", url)
    try:
        r = httpx.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        r.raise_for_status()
        return r.json()
    except (httpx.HTTPError, ValueError) as e:
        raise jsonld.JsonLdError(
            f"Could not retrieve a JSON-LD document from {url}.",
            "jsonld.LoadDocumentError",
            {"url": url},
            code="loading document failed",
        ) from e


def build_document_loader(allow_remote=None, timeout=None):
    """Return a loader usable as PyLD's ``documentLoader`` option.

    Arguments left as None are taken from :class:`Settings`.
    """
    if allow_remote is None or timeout is None:
        settings = Settings()
        if allow_remote is None:
            allow_remote = settings.allow_remote_contexts
        if timeout is None:
            timeout = settings.context_timeout

    def loader(url, options=None):
        if url in BUNDLED_CONTEXTS:
            return _remote_document(url, load_bundled_context(url))

        if not allow_remote:
            raise jsonld.JsonLdError(
                f"JSON-LD context {url} is not bundled and remote loading is disabled.",
                "jsonld.LoadDocumentError",
                {"url": url},
                code="loading document failed",
            )
        return _remote_document(url, fetch_remote_context(url, timeout=timeout))

    return loader
