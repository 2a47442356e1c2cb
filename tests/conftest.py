import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from hostcheck.crypto.issue import issue_cert


@pytest.fixture(scope="session")
def leaf_key():
    # EC keeps the suite fast; the validator never looks at the key
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def make_cert(leaf_key):
    def _make(common_names=(), dns_names=None, extra_names=()):
        return issue_cert(
            common_names=common_names,
            dns_names=dns_names,
            extra_names=extra_names,
            key=leaf_key,
        )

    return _make
