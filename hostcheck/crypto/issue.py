"""
Issue test certificates with arbitrary identity content.

Used by scripts/gen_ca.py, scripts/gen_cert.py and the test-suite. Names are
written verbatim, so a DNS name or CN with an embedded NUL ends up in the
certificate exactly as given.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, Tuple

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from hostcheck.common.config import get_key_size, get_valid_days


def generate_key(key_size: Optional[int] = None) -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(
        public_exponent=65537,
        key_size=key_size or get_key_size(),
    )


def build_name(common_names: Sequence[str] = (), organization: str = "hostcheck") -> x509.Name:
    """Subject with an O attribute followed by every CN, in the given order."""
    attrs = [x509.NameAttribute(NameOID.ORGANIZATION_NAME, organization)]
    attrs += [x509.NameAttribute(NameOID.COMMON_NAME, cn) for cn in common_names]
    return x509.Name(attrs)


def build_ca(key=None, common_name: str = "hostcheck Test CA") -> Tuple[x509.Certificate, object]:
    """Self-signed CA certificate. Returns (cert, key)."""
    key = key or generate_key()
    name = build_name([common_name])
    now = datetime.now(timezone.utc)

    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)  # self-signed
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=3650))
        .add_extension(
            x509.BasicConstraints(ca=True, path_length=None),
            critical=True,
        )
        .sign(private_key=key, algorithm=hashes.SHA256())
    )
    return cert, key


def issue_cert(
    common_names: Sequence[str] = (),
    dns_names: Optional[Sequence[str]] = None,
    extra_names: Sequence[x509.GeneralName] = (),
    key=None,
    issuer: Optional[Tuple[x509.Certificate, object]] = None,
) -> x509.Certificate:
    """
    Build a leaf certificate.

    dns_names=None with no extra_names leaves the SAN extension out entirely.
    extra_names (IP, email, URI...) are placed before the DNS names.
    """
    key = key or generate_key()
    if issuer is not None:
        issuer_cert, signing_key = issuer
        issuer_name = issuer_cert.subject
    else:
        signing_key = key
        issuer_name = build_name(common_names)
    now = datetime.now(timezone.utc)

    builder = (
        x509.CertificateBuilder()
        .subject_name(build_name(common_names))
        .issuer_name(issuer_name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=get_valid_days()))
        .add_extension(
            x509.BasicConstraints(ca=False, path_length=None),
            critical=True,
        )
    )
    if dns_names is not None or extra_names:
        general_names = list(extra_names) + [x509.DNSName(n) for n in dns_names or ()]
        builder = builder.add_extension(
            x509.SubjectAlternativeName(general_names),
            critical=False,
        )
    return builder.sign(private_key=signing_key, algorithm=hashes.SHA256())


def write_pem(prefix: str, cert: x509.Certificate, key) -> Tuple[str, str]:
    """Write <prefix>.key.pem and <prefix>.cert.pem, return both paths."""
    key_path = f"{prefix}.key.pem"
    with open(key_path, "wb") as f:
        f.write(
            key.private_bytes(
                serialization.Encoding.PEM,
                serialization.PrivateFormat.TraditionalOpenSSL,
                serialization.NoEncryption(),
            )
        )

    cert_path = f"{prefix}.cert.pem"
    with open(cert_path, "wb") as f:
        f.write(cert.public_bytes(serialization.Encoding.PEM))

    return key_path, cert_path
