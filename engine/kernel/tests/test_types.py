"""Tests for the portfolio value types and their wire-dict conversions."""

from engine.kernel.types import CONTACT_CHANNELS, ContactInfo, PortfolioData, Project


class TestProject:
    def test_to_dict_uses_camel_case_and_omits_absent(self):
        d = Project("A", "a", tags=("x", "x"), repo_url="https://r").to_dict()
        assert d == {"title": "A", "description": "a", "tags": ["x", "x"], "repoUrl": "https://r"}

    def test_from_dict_blank_urls_are_absent(self):
        p = Project.from_dict({"title": "A", "description": "a", "tags": [], "demoUrl": ""})
        assert p.demo_url is None
        assert p.repo_url is None


class TestContactInfo:
    def test_present_in_display_order(self):
        c = ContactInfo(dribbble="d", email="e", github="g")
        assert c.present() == [("email", "e"), ("github", "g"), ("dribbble", "d")]

    def test_empty_string_is_absent(self):
        assert ContactInfo(email="").present() == []

    def test_channels(self):
        assert CONTACT_CHANNELS == ("email", "github", "linkedin", "twitter", "instagram", "dribbble")


class TestPortfolioData:
    def test_from_dict_to_dict(self):
        raw = {
            "theme": "creative-purple",
            "personalInfo": {"name": "Ada", "role": "Engineer", "bio": "Hi."},
            "projects": [{"title": "A", "description": "a", "tags": ["x"], "imageUrl": "https://i"}],
            "contact": {"email": "ada@example.com"},
        }
        assert PortfolioData.from_dict(raw).to_dict() == raw

    def test_unknown_theme_kept_as_given(self):
        assert PortfolioData.from_dict({"theme": "neon"}).theme == "neon"

    def test_missing_sections_default(self):
        data = PortfolioData.from_dict({})
        assert data.theme == "minimal-light"
        assert data.projects == ()
        assert data.contact.present() == []
