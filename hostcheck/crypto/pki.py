"""X.509 access: load certs, read SAN general names and subject CNs."""

from contextlib import contextmanager
from typing import Iterator, List

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.x509.oid import NameOID, ExtensionOID

from hostcheck.common.utils import sha256_hex


PEM_MARKER = b"-----BEGIN"


def load_cert(data: bytes) -> x509.Certificate:
    """
    Parse a certificate from PEM or DER bytes.

    Raises ValueError if the data is not a certificate.
    """
    if data.lstrip().startswith(PEM_MARKER):
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


def load_cert_file(path: str) -> x509.Certificate:
    """Load a PEM- or DER-encoded X.509 certificate from disk."""
    with open(path, "rb") as f:
        return load_cert(f.read())


@contextmanager
def subject_alt_names(cert: x509.Certificate) -> Iterator[List[x509.GeneralName]]:
    """
    Yield the decoded SAN general names, in certificate order.

    Raises x509.ExtensionNotFound if the certificate has no SAN extension.
    The list is released when the block exits, however it exits.
    """
    ext = cert.extensions.get_extension_for_oid(ExtensionOID.SUBJECT_ALTERNATIVE_NAME)
    names = list(ext.value)
    try:
        yield names
    finally:
        names.clear()


def subject_common_names(cert: x509.Certificate) -> List[str]:
    """
    Return every CN value in the subject, in DER order.

    Ordering comes from cryptography's Name iteration.
    """
    return [attr.value for attr in cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)]


def fingerprint_cert(cert: x509.Certificate) -> str:
    """SHA-256 fingerprint of the certificate (DER)."""
    return sha256_hex(cert.public_bytes(serialization.Encoding.DER))
