from sri_validator.headers import SECURITY_HEADERS, audit_headers

ALL_HEADERS = """
<meta http-equiv="Content-Security-Policy" content="default-src 'self'">
<meta http-equiv="X-Frame-Options" content="DENY">
<meta http-equiv="X-Content-Type-Options" content="nosniff">
<meta name="referrer" http-equiv="Referrer-Policy" content="no-referrer">
"""


def test_all_headers_present() -> None:
    assert audit_headers(ALL_HEADERS) == []


def test_all_headers_missing_in_fixed_order() -> None:
    issues = audit_headers("<html><head></head></html>")

    assert issues == [f"Missing {name} header" for name in SECURITY_HEADERS]
    assert len(issues) == 4


def test_match_is_case_sensitive() -> None:
    issues = audit_headers(ALL_HEADERS.replace("X-Frame-Options", "x-frame-options"))

    assert issues == ["Missing X-Frame-Options header"]


def test_any_textual_occurrence_counts() -> None:
    html = "<!-- Content-Security-Policy X-Frame-Options X-Content-Type-Options Referrer-Policy -->"

    assert audit_headers(html) == []
