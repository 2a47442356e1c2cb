"""
Outcome and report models for hostname validation.
ValidationOutcome is the ONLY value the validator hands back to callers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


# -------------------------
# Outcomes
# -------------------------

class ValidationOutcome(Enum):
    MATCH_FOUND = "match_found"
    MATCH_NOT_FOUND = "match_not_found"
    MALFORMED_IDENTITY = "malformed_identity"
    NO_SAN_PRESENT = "no_san_present"   # internal: never leaves validate_hostname
    VALIDATION_ERROR = "validation_error"

    @property
    def is_match(self) -> bool:
        return self is ValidationOutcome.MATCH_FOUND


# -------------------------
# Candidate identities
# -------------------------

@dataclass(frozen=True)
class IdentityString:
    """
    A name taken from the certificate, with both of its lengths.

    declared_length is the length recorded by the ASN.1 string,
    effective_length is where a C string reader would stop (first NUL).
    """

    raw: bytes
    declared_length: int
    effective_length: int
    source: str     # "san" | "cn"

    @property
    def is_malformed(self) -> bool:
        return self.declared_length != self.effective_length

    def display(self) -> str:
        return self.raw.decode("utf-8", errors="backslashreplace").replace("\x00", "\\x00")


# -------------------------
# Diagnostic report
# -------------------------

class HostnameReport(BaseModel):
    hostname: str
    outcome: ValidationOutcome
    source: Optional[str] = None            # "san" | "cn"
    matched_name: Optional[str] = None
    malformed_name: Optional[str] = None
    dns_names: List[str] = []
    fingerprint: Optional[str] = None       # sha256 hex of cert DER
