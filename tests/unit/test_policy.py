import pytest

from sri_validator.models.resource import Resource, ResourceKind
from sri_validator.policy import ExemptionRule, exemption_for, requires_integrity


def _resource(url: str, element: str | None = None, **kwargs) -> Resource:
    return Resource(
        kind=kwargs.pop("kind", ResourceKind.STYLESHEET_LINK),
        url=url,
        integrity=kwargs.pop("integrity", None),
        has_crossorigin=kwargs.pop("has_crossorigin", False),
        element=element if element is not None else f'<link href="{url}">',
    )


@pytest.mark.parametrize("integrity, crossorigin", [(None, False), ("sha384-abc", True)])
def test_preconnect_never_requires_integrity(integrity, crossorigin) -> None:
    resource = _resource(
        "https://cdn.example.com",
        element='<link rel="preconnect" href="https://cdn.example.com">',
        integrity=integrity,
        has_crossorigin=crossorigin,
    )

    assert requires_integrity(resource) is False
    assert exemption_for(resource).id == "preconnect"


def test_font_awesome_kit_is_exempt() -> None:
    resource = _resource("https://kit.fontawesome.com/abc123.js", kind=ResourceKind.SCRIPT)

    assert requires_integrity(resource) is False
    assert exemption_for(resource).id == "font-awesome-kit"


def test_google_fonts_css_is_exempt() -> None:
    resource = _resource("https://fonts.googleapis.com/css2?family=Inter")

    assert requires_integrity(resource) is False
    assert exemption_for(resource).id == "google-fonts-css"


def test_google_fonts_without_css_requires_integrity() -> None:
    resource = _resource("https://fonts.googleapis.com/icon?family=Material+Icons")

    assert requires_integrity(resource) is True


def test_static_cdn_requires_integrity() -> None:
    resource = _resource("https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css")

    assert requires_integrity(resource) is True
    assert exemption_for(resource) is None


def test_custom_rules_replace_defaults() -> None:
    rules = [ExemptionRule(id="internal", reason="Internal CDN", url_contains=("cdn.internal",))]
    preconnect = _resource(
        "https://cdn.example.com", element='<link rel="preconnect" href="https://cdn.example.com">'
    )

    assert requires_integrity(_resource("https://cdn.internal/x.js"), rules) is False
    assert requires_integrity(preconnect, rules) is True


def test_rule_requires_a_condition() -> None:
    with pytest.raises(ValueError):
        ExemptionRule(id="empty", reason="nothing")


def test_rule_to_dict() -> None:
    rule = ExemptionRule.from_iterables(
        id="google-fonts-css", reason="dynamic", url_contains=["fonts.googleapis.com", "css"]
    )

    assert rule.to_dict() == {
        "id": "google-fonts-css",
        "reason": "dynamic",
        "markupContains": [],
        "urlContains": ["fonts.googleapis.com", "css"],
    }
