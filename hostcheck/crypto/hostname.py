"""
Hostname validation against a server certificate.

As described in RFC 6125, the Subject Alternative Name extension is tried
first. The Common Name is only consulted when the certificate carries no SAN
extension at all: once SAN is present, it alone decides.

Matching is exact and ASCII case-insensitive. No wildcard support.
"""

import logging
from typing import List, Optional, Tuple

from cryptography import x509

from hostcheck.common.models import HostnameReport, IdentityString, ValidationOutcome
from hostcheck.common.utils import hostname_matches, make_identity
from hostcheck.crypto.pki import fingerprint_cert, subject_alt_names, subject_common_names


logger = logging.getLogger(__name__)

HOSTNAME_MAX_SIZE = 255

# Raised by cryptography when a field is present but cannot be decoded.
DECODE_ERRORS = (ValueError, x509.DuplicateExtension, x509.UnsupportedGeneralNameType)

_Result = Tuple[ValidationOutcome, Optional[IdentityString], List[str]]


# ------------------------ SAN ------------------------

def _scan_subject_alternative_name(hostname: str, cert: x509.Certificate) -> _Result:
    inspected: List[str] = []

    try:
        with subject_alt_names(cert) as names:
            for name in names:
                if not isinstance(name, x509.DNSName):
                    continue

                identity = make_identity(name.value, "san")
                inspected.append(identity.display())

                # Make sure there isn't an embedded NUL in the DNS name
                if identity.is_malformed:
                    return ValidationOutcome.MALFORMED_IDENTITY, identity, inspected

                if hostname_matches(hostname, identity):
                    return ValidationOutcome.MATCH_FOUND, identity, inspected
    except x509.ExtensionNotFound:
        return ValidationOutcome.NO_SAN_PRESENT, None, inspected
    except DECODE_ERRORS as e:
        logger.error("[PKI] Could not decode SAN extension: %s", e)
        return ValidationOutcome.VALIDATION_ERROR, None, inspected

    return ValidationOutcome.MATCH_NOT_FOUND, None, inspected


def matches_subject_alternative_name(hostname: str, cert: x509.Certificate) -> ValidationOutcome:
    """
    Try to find hostname among the DNS names of the SAN extension.

    Returns MATCH_FOUND if a match was found.
    Returns MATCH_NOT_FOUND if no DNS name matched.
    Returns MALFORMED_IDENTITY as soon as a DNS name with an embedded NUL is seen.
    Returns NO_SAN_PRESENT if the certificate has no SAN extension.
    Returns VALIDATION_ERROR if the extension exists but cannot be decoded.
    """
    return _scan_subject_alternative_name(hostname, cert)[0]


# ------------------------ CN ------------------------

def _scan_common_name(hostname: str, cert: x509.Certificate) -> _Result:
    try:
        common_names = subject_common_names(cert)
    except DECODE_ERRORS as e:
        logger.error("[PKI] Could not decode subject: %s", e)
        return ValidationOutcome.VALIDATION_ERROR, None, []

    if not common_names:
        return ValidationOutcome.VALIDATION_ERROR, None, []

    if len(set(common_names)) > 1:
        logger.warning(
            "[PKI] Subject has %d differing CNs %r; using the last one",
            len(common_names),
            common_names,
        )

    identity = make_identity(common_names[-1], "cn")

    # Make sure there isn't an embedded NUL in the CN
    if identity.is_malformed:
        return ValidationOutcome.MALFORMED_IDENTITY, identity, []

    if hostname_matches(hostname, identity):
        return ValidationOutcome.MATCH_FOUND, identity, []
    return ValidationOutcome.MATCH_NOT_FOUND, identity, []


def matches_common_name(hostname: str, cert: x509.Certificate) -> ValidationOutcome:
    """
    Try to find hostname in the subject's Common Name.

    Returns MATCH_FOUND / MATCH_NOT_FOUND for a well-formed CN,
    MALFORMED_IDENTITY if the CN has an embedded NUL,
    VALIDATION_ERROR if there is no CN or the subject cannot be decoded.
    """
    return _scan_common_name(hostname, cert)[0]


# ------------------------ Validator ------------------------

def _check_inputs(hostname, cert) -> bool:
    if not isinstance(hostname, str) or not hostname:
        return False
    if "\x00" in hostname:
        return False
    if len(hostname.encode("utf-8")) > HOSTNAME_MAX_SIZE:
        return False
    return isinstance(cert, x509.Certificate)


def _decide(hostname: str, cert: x509.Certificate) -> HostnameReport:
    if not _check_inputs(hostname, cert):
        logger.error("[PKI] Unusable input for hostname validation: %r", hostname)
        return HostnameReport(
            hostname=hostname if isinstance(hostname, str) else "",
            outcome=ValidationOutcome.VALIDATION_ERROR,
        )

    # First try the SAN extension
    source = "san"
    outcome, identity, inspected = _scan_subject_alternative_name(hostname, cert)
    if outcome is ValidationOutcome.NO_SAN_PRESENT:
        # Extension not found: fall back to the CN
        logger.debug("[PKI] No SAN extension, checking CN for %s", hostname)
        source = "cn"
        outcome, identity, _ = _scan_common_name(hostname, cert)

    report = HostnameReport(hostname=hostname, outcome=outcome, source=source, dns_names=inspected)
    if outcome is ValidationOutcome.MATCH_FOUND:
        report.matched_name = identity.display()
    elif outcome is ValidationOutcome.MALFORMED_IDENTITY:
        report.malformed_name = identity.display()
        logger.warning(
            "[PKI] Embedded NUL in certificate %s name %s (declared %d bytes, %d before NUL); possible tampering",
            source.upper(),
            report.malformed_name,
            identity.declared_length,
            identity.effective_length,
        )
    return report


def validate_hostname(hostname: str, cert: x509.Certificate) -> ValidationOutcome:
    """
    Validate the server's identity by looking for hostname in its certificate.

    Returns MATCH_FOUND, MATCH_NOT_FOUND, MALFORMED_IDENTITY or VALIDATION_ERROR.
    Anything other than MATCH_FOUND means the connection must not be trusted
    for this hostname.
    """
    return _decide(hostname, cert).outcome


def check_hostname(hostname: str, cert: x509.Certificate) -> HostnameReport:
    """
    Same decision as validate_hostname, with the details behind it.

    The fingerprint is only filled in when a certificate was actually checked.
    """
    report = _decide(hostname, cert)
    if report.source is not None:
        report.fingerprint = fingerprint_cert(cert)
    return report
