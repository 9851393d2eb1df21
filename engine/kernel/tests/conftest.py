"""
Engine kernel test configuration.

Shared portfolio builders. Kernel tests are pure: no network, no server,
no event loop beyond what MockLLM streaming needs.
"""

from __future__ import annotations

import pytest

from engine.kernel.types import ContactInfo, PersonalInfo, PortfolioData, Project


def make_project(title="Project", tags=(), **kwargs) -> Project:
    return Project(title=title, description=kwargs.pop("description", f"About {title}."), tags=tuple(tags), **kwargs)


def make_portfolio(theme="minimal-light", projects=(), name="Ada Lovelace", **contact) -> PortfolioData:
    return PortfolioData(
        theme=theme,
        personal_info=PersonalInfo(name=name, role="Engineer", bio="I build things."),
        projects=tuple(projects),
        contact=ContactInfo(**contact),
    )


@pytest.fixture
def portfolio_factory():
    """Build a PortfolioData with sensible defaults."""
    return make_portfolio


@pytest.fixture
def project_factory():
    """Build a Project with sensible defaults."""
    return make_project


@pytest.fixture
def tagged_portfolio() -> PortfolioData:
    """Three projects: two tagged "react", one "rust", one untagged."""
    return make_portfolio(
        theme="modern-dark",
        projects=[
            make_project("Alpha", tags=["react", "ui"], demo_url="https://alpha.example.com"),
            make_project("Beta", tags=["rust"], repo_url="https://github.com/ada/beta"),
            make_project("Gamma", tags=["react"]),
            make_project("Delta"),
        ],
        email="ada@example.com",
        github="https://github.com/ada",
    )
