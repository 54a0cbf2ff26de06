from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PROOF_TYPE = "JsonWebSignature2020"
PROOF_PURPOSE = "assertionMethod"


class Flavour(str, Enum):
    """Rule used to build the bytes that get signed.

    SPECIFICATION signs sha256(proof) || sha256(document) as raw bytes,
    GAIA_X signs the UTF-8 hex string of sha256(document).
    """

    SPECIFICATION = "Specification"
    GAIA_X = "Gaia-X"


class SignOptions(BaseModel):
    flavour: Flavour = Flavour.GAIA_X
    created: Optional[str] = None


class JsonWebSignature2020Proof(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["JsonWebSignature2020"] = PROOF_TYPE
    created: str
    proof_purpose: Literal["assertionMethod"] = Field(PROOF_PURPOSE, alias="proofPurpose")
    verification_method: str = Field(..., min_length=1, alias="verificationMethod")
    jws: str = ""

    def to_jsonld(self) -> dict:
        return self.model_dump(by_alias=True)
