import pytest
from jwcrypto import jwk

from jws2020_signer.loader import build_document_loader


@pytest.fixture
def loader():
    return build_document_loader(allow_remote=False, timeout=1.0)


@pytest.fixture
def ed25519_key() -> jwk.JWK:
    return jwk.JWK.generate(kty="OKP", crv="Ed25519")


@pytest.fixture
def ed25519_jwk(ed25519_key) -> dict:
    return ed25519_key.export(private_key=True, as_dict=True)


@pytest.fixture
def ed25519_public(ed25519_key) -> jwk.JWK:
    return jwk.JWK.from_json(ed25519_key.export_public())


@pytest.fixture
def credential() -> dict:
    return {
        "@context": ["https://www.w3.org/2018/credentials/v1"],
        "type": "VerifiableCredential",
        "credentialSubject": {"id": "did:example:1"},
    }


@pytest.fixture
def full_credential() -> dict:
    return {
        "@context": [
            "https://www.w3.org/2018/credentials/v1",
            "https://w3id.org/security/suites/jws-2020/v1",
        ],
        "id": "urn:uuid:5b1c7d1e-2f7e-4d6b-9a4b-0c4e2c3d9a10",
        "type": ["VerifiableCredential"],
        "issuer": "did:example:issuer",
        "issuanceDate": "2024-01-01T00:00:00Z",
        "credentialSubject": {"id": "did:example:subject"},
    }
