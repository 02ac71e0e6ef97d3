from pathlib import Path

from sri_validator.models.resource import ResourceKind
from sri_validator.parsers.html_resources import extract_resources, parse


def test_no_external_resources() -> None:
    html = """
    <link rel="stylesheet" href="/css/site.css">
    <script src="js/app.js"></script>
    <script>console.log("inline")</script>
    """
    assert extract_resources(html) == []


def test_links_are_listed_before_scripts() -> None:
    html = """
    <script src="https://cdn.example.com/a.js"></script>
    <link rel="stylesheet" href="https://cdn.example.com/a.css">
    <script src="https://cdn.example.com/b.js"></script>
    <link rel="stylesheet" href="https://cdn.example.com/b.css">
    """
    resources = extract_resources(html)

    assert [(r.kind, r.url) for r in resources] == [
        (ResourceKind.STYLESHEET_LINK, "https://cdn.example.com/a.css"),
        (ResourceKind.STYLESHEET_LINK, "https://cdn.example.com/b.css"),
        (ResourceKind.SCRIPT, "https://cdn.example.com/a.js"),
        (ResourceKind.SCRIPT, "https://cdn.example.com/b.js"),
    ]


def test_integrity_and_crossorigin_values() -> None:
    html = (
        '<script src="https://cdn.example.com/lib.js" '
        "integrity='sha384-abc+/=' crossorigin=\"anonymous\"></script>"
    )
    (resource,) = extract_resources(html)

    assert resource.integrity == "sha384-abc+/="
    assert resource.has_crossorigin is True
    assert resource.element.startswith("<script")
    assert resource.element.endswith(">")


def test_bare_crossorigin_attribute_counts_as_present() -> None:
    html = '<link rel="stylesheet" href="https://cdn.example.com/x.css" crossorigin>'
    (resource,) = extract_resources(html)

    assert resource.integrity is None
    assert resource.has_crossorigin is True


def test_missing_crossorigin() -> None:
    html = '<script src="http://cdn.example.com/x.js"></script>'
    (resource,) = extract_resources(html)

    assert resource.url == "http://cdn.example.com/x.js"
    assert resource.has_crossorigin is False


def test_attribute_names_are_case_insensitive() -> None:
    html = '<SCRIPT SRC="https://cdn.example.com/x.js" INTEGRITY="sha256-xyz"></SCRIPT>'
    (resource,) = extract_resources(html)

    assert resource.kind is ResourceKind.SCRIPT
    assert resource.integrity == "sha256-xyz"


def test_parse_reads_file(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text('<link href="https://fonts.example.com/f.css" rel="stylesheet">', encoding="utf-8")

    resources = parse(page)

    assert len(resources) == 1
    assert resources[0].url == "https://fonts.example.com/f.css"
