"""Environment config for the certificate tooling (see .env.example)."""

import os

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    # Fine as long as env vars are set some other way
    pass


BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_certs_dir() -> str:
    return os.getenv("HOSTCHECK_CERTS_DIR", os.path.join(BASE_DIR, "certs"))


def get_key_size() -> int:
    return int(os.getenv("HOSTCHECK_KEY_SIZE", "2048"))


def get_valid_days() -> int:
    return int(os.getenv("HOSTCHECK_VALID_DAYS", "365"))
