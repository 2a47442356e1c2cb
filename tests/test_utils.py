from hostcheck.common.models import ValidationOutcome
from hostcheck.common.utils import (
    ascii_casefold_equal,
    effective_length,
    hostname_matches,
    make_identity,
    sha256_hex,
)


def test_effective_length():
    assert effective_length(b"example.com") == 11
    assert effective_length(b"abc\x00efghij") == 3
    assert effective_length(b"\x00") == 0
    assert effective_length(b"") == 0


def test_make_identity_lengths():
    ident = make_identity("abc\x00efghij", "san")
    assert ident.declared_length == 10
    assert ident.effective_length == 3
    assert ident.is_malformed
    assert ident.source == "san"


def test_make_identity_counts_bytes_not_chars():
    ident = make_identity("bücher.de", "cn")
    assert ident.declared_length == len("bücher.de".encode("utf-8"))
    assert not ident.is_malformed


def test_display_escapes_nul():
    assert make_identity("a.com\x00.evil", "san").display() == "a.com\\x00.evil"


def test_ascii_casefold_only():
    assert ascii_casefold_equal(b"Example.COM", b"example.com")
    assert not ascii_casefold_equal(b"example.com", b"example.co")
    # non-ASCII bytes must match exactly (\xc3\xa9 is e-acute, \xc3\x89 E-acute)
    assert not ascii_casefold_equal(b"\xc3\xa9.fr", b"\xc3\x89.fr")
    assert ascii_casefold_equal(b"\xc3\xa9.FR", b"\xc3\xa9.fr")


def test_hostname_matches():
    assert hostname_matches("B.com", make_identity("b.COM", "san"))
    assert not hostname_matches("b.com", make_identity("b.com.", "san"))


def test_sha256_hex():
    assert sha256_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert sha256_hex(b"") == sha256_hex("")


def test_outcome_is_match():
    assert ValidationOutcome.MATCH_FOUND.is_match
    assert not any(
        o.is_match for o in ValidationOutcome if o is not ValidationOutcome.MATCH_FOUND
    )
