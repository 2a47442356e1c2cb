"""
Create a throwaway Root CA for hostname-validation experiments.
Generates:
    <certs dir>/ca.key.pem   (private key, NOT to be committed)
    <certs dir>/ca.cert.pem  (self-signed root certificate)
"""

import os

from hostcheck.common.config import get_certs_dir
from hostcheck.crypto.issue import build_ca, write_pem


def main():
    certs_dir = get_certs_dir()
    os.makedirs(certs_dir, exist_ok=True)

    ca_cert, ca_key = build_ca()
    key_path, cert_path = write_pem(os.path.join(certs_dir, "ca"), ca_cert, ca_key)

    print(f"[+] CA private key written to: {key_path}")
    print(f"[+] CA certificate   written to: {cert_path}")
    print("[!] DO NOT COMMIT ca.key.pem")


if __name__ == "__main__":
    main()
