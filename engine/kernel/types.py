"""
Folio Kernel — Shared Types

Data classes used across the theme resolver, tag index, both renderers,
and the merge policy. These are the contracts that bind the kernel together.

A PortfolioData value is never mutated. Every update from the conversation
produces a brand new object, so renderers can compare by identity to detect
a replacement.

Wire format (what the synthesizer returns and what the JSON API exposes)
uses camelCase keys: personalInfo, demoUrl, repoUrl, imageUrl.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

# ---------------------------------------------------------------------------
# Closed sets
# ---------------------------------------------------------------------------

Theme = Literal["minimal-light", "modern-dark", "professional-blue", "creative-purple"]

THEMES: tuple[str, ...] = (
    "minimal-light",
    "modern-dark",
    "professional-blue",
    "creative-purple",
)

DEFAULT_THEME: str = "minimal-light"

# Display order of contact affordances: email first, then socials
CONTACT_CHANNELS: tuple[str, ...] = (
    "email",
    "github",
    "linkedin",
    "twitter",
    "instagram",
    "dribbble",
)

SOCIAL_CHANNELS: tuple[str, ...] = CONTACT_CHANNELS[1:]

Role = Literal["user", "model"]


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Project:
    """One portfolio entry. Tags keep their order and duplicates."""

    title: str
    description: str
    tags: tuple[str, ...] = ()
    demo_url: str | None = None
    repo_url: str | None = None
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
        }
        if self.demo_url:
            d["demoUrl"] = self.demo_url
        if self.repo_url:
            d["repoUrl"] = self.repo_url
        if self.image_url:
            d["imageUrl"] = self.image_url
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Project:
        return cls(
            title=d.get("title") or "",
            description=d.get("description") or "",
            tags=tuple(str(t) for t in d.get("tags") or ()),
            demo_url=d.get("demoUrl") or None,
            repo_url=d.get("repoUrl") or None,
            image_url=d.get("imageUrl") or None,
        )


@dataclass(frozen=True)
class PersonalInfo:
    name: str = ""
    role: str = ""
    bio: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "role": self.role, "bio": self.bio}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PersonalInfo:
        return cls(
            name=d.get("name") or "",
            role=d.get("role") or "",
            bio=d.get("bio") or "",
        )


@dataclass(frozen=True)
class ContactInfo:
    """
    Contact channels. Every channel is optional; an empty string is
    treated the same as a missing one so no renderer emits a dead link.
    """

    email: str | None = None
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    dribbble: str | None = None

    def get(self, channel: str) -> str | None:
        return getattr(self, channel, None) or None

    def present(self, channels: tuple[str, ...] = CONTACT_CHANNELS) -> list[tuple[str, str]]:
        """(channel, value) pairs for the channels that are set, in display order."""
        pairs = []
        for channel in channels:
            value = self.get(channel)
            if value:
                pairs.append((channel, value))
        return pairs

    def to_dict(self) -> dict[str, Any]:
        return dict(self.present())

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ContactInfo:
        return cls(**{channel: d.get(channel) or None for channel in CONTACT_CHANNELS})


@dataclass(frozen=True)
class PortfolioData:
    """
    The root aggregate. Replaced wholesale, never patched.

    `theme` is stored as given. The kernel never rejects an unknown theme;
    the resolvers fall back to DEFAULT_THEME instead.
    """

    theme: str = DEFAULT_THEME
    personal_info: PersonalInfo = PersonalInfo()
    projects: tuple[Project, ...] = ()
    contact: ContactInfo = ContactInfo()

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme,
            "personalInfo": self.personal_info.to_dict(),
            "projects": [p.to_dict() for p in self.projects],
            "contact": self.contact.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PortfolioData:
        return cls(
            theme=d.get("theme") or DEFAULT_THEME,
            personal_info=PersonalInfo.from_dict(d.get("personalInfo") or {}),
            projects=tuple(Project.from_dict(p) for p in d.get("projects") or ()),
            contact=ContactInfo.from_dict(d.get("contact") or {}),
        )


@dataclass(frozen=True)
class Message:
    """One line of the conversation transcript."""

    role: Role
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "text": self.text}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Message:
        return cls(role=d["role"], text=d.get("text", ""))
