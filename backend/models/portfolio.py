"""Portfolio models — the synthesizer's structured response contract."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from engine.kernel.types import PortfolioData

ThemeName = Literal["minimal-light", "modern-dark", "professional-blue", "creative-purple"]

_WIRE_CONFIG = ConfigDict(populate_by_name=True)


class ProjectModel(BaseModel):
    model_config = _WIRE_CONFIG

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    demo_url: str | None = Field(default=None, alias="demoUrl")
    repo_url: str | None = Field(default=None, alias="repoUrl")
    image_url: str | None = Field(default=None, alias="imageUrl")


class PersonalInfoModel(BaseModel):
    name: str
    role: str
    bio: str


class ContactModel(BaseModel):
    email: str | None = None
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    dribbble: str | None = None


class PortfolioModel(BaseModel):
    """
    A complete portfolio as the synthesizer must return it.

    `theme` is strict: a value outside the four variants is a contract
    violation and fails validation rather than being coerced.
    """

    model_config = _WIRE_CONFIG

    theme: ThemeName
    personal_info: PersonalInfoModel = Field(alias="personalInfo")
    projects: list[ProjectModel]
    contact: ContactModel

    def to_portfolio(self) -> PortfolioData:
        """Convert to the immutable kernel value."""
        return PortfolioData.from_dict(self.model_dump(by_alias=True, exclude_none=True))


class SynthesizerResponse(BaseModel):
    """What every synthesizer round must return."""

    model_config = _WIRE_CONFIG

    chat_response: str = Field(alias="chatResponse")
    portfolio: PortfolioModel | None = None
