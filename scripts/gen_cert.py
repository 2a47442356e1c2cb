"""
Issue a leaf certificate with chosen SAN/CN content, signed by the test CA.
A literal "\\0" inside a name is written as an embedded NUL byte, e.g.

    python scripts/gen_cert.py --san 'bank.com\\0.evil.com' --out certs/nul

Generates:
    <prefix>.key.pem
    <prefix>.cert.pem
"""

import argparse
import os

from cryptography.hazmat.primitives import serialization

from hostcheck.common.config import get_certs_dir
from hostcheck.crypto.issue import generate_key, issue_cert, write_pem
from hostcheck.crypto.pki import load_cert_file


def unescape_nul(name: str) -> str:
    return name.replace("\\0", "\x00")


def load_ca(certs_dir: str):
    """Load CA cert + private key, or None if gen_ca.py was not run."""
    cert_path = os.path.join(certs_dir, "ca.cert.pem")
    key_path = os.path.join(certs_dir, "ca.key.pem")
    if not (os.path.exists(cert_path) and os.path.exists(key_path)):
        return None

    with open(key_path, "rb") as f:
        ca_key = serialization.load_pem_private_key(f.read(), password=None)
    return load_cert_file(cert_path), ca_key


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--cn", action="append", default=[], help="Common Name (repeatable, last one wins)")
    parser.add_argument("--san", action="append", default=None, help="SAN DNS name (repeatable)")
    parser.add_argument("--out", required=True, help="Output prefix (e.g., certs/server)")
    args = parser.parse_args(argv)

    certs_dir = get_certs_dir()
    os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)

    issuer = load_ca(certs_dir)
    if issuer is None:
        print(f"[!] No CA in {certs_dir}, issuing self-signed")

    key = generate_key()
    cert = issue_cert(
        common_names=[unescape_nul(cn) for cn in args.cn],
        dns_names=[unescape_nul(n) for n in args.san] if args.san is not None else None,
        key=key,
        issuer=issuer,
    )
    key_path, cert_path = write_pem(args.out, cert, key)

    print(f"[+] Entity key written:  {key_path}")
    print(f"[+] Entity cert written: {cert_path}")


if __name__ == "__main__":
    main()
