from hostcheck.common.models import HostnameReport, ValidationOutcome
from hostcheck.crypto.hostname import check_hostname, validate_hostname
from hostcheck.crypto.pki import fingerprint_cert


def test_report_san_match(make_cert):
    cert = make_cert(common_names=["x.com"], dns_names=["a.com", "B.com", "c.com"])
    report = check_hostname("b.com", cert)

    assert isinstance(report, HostnameReport)
    assert report.outcome is ValidationOutcome.MATCH_FOUND
    assert report.source == "san"
    assert report.matched_name == "B.com"
    assert report.dns_names == ["a.com", "B.com"]
    assert report.fingerprint == fingerprint_cert(cert)


def test_report_cn_fallback(make_cert):
    report = check_hostname("b.com", make_cert(common_names=["b.com"]))
    assert report.outcome is ValidationOutcome.MATCH_FOUND
    assert report.source == "cn"
    assert report.matched_name == "b.com"
    assert report.dns_names == []


def test_report_malformed(make_cert):
    report = check_hostname("b.com", make_cert(dns_names=["b.com\x00.evil.com", "b.com"]))
    assert report.outcome is ValidationOutcome.MALFORMED_IDENTITY
    assert report.malformed_name == "b.com\\x00.evil.com"
    assert report.matched_name is None
    assert report.dns_names == ["b.com\\x00.evil.com"]


def test_report_bad_input():
    report = check_hostname(None, None)
    assert report.outcome is ValidationOutcome.VALIDATION_ERROR
    assert report.source is None
    assert report.fingerprint is None


def test_report_agrees_with_validate(make_cert):
    certs = [
        make_cert(dns_names=["a.com"], common_names=["b.com"]),
        make_cert(common_names=["b.com"]),
        make_cert(),
        make_cert(dns_names=["b\x00.com"]),
    ]
    for cert in certs:
        assert check_hostname("b.com", cert).outcome is validate_hostname("b.com", cert)


def test_report_serialises(make_cert):
    data = check_hostname("b.com", make_cert(dns_names=["b.com"])).model_dump(mode="json")
    assert data["outcome"] == "match_found"
    assert data["source"] == "san"
