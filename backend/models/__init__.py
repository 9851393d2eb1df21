"""
Pydantic models for Folio.

All data shapes defined here. No imports from services or routes.
"""

from backend.models.conversation import (
    Message,
    SelectTagRequest,
    SendMessageRequest,
    WorkspaceResponse,
)
from backend.models.portfolio import (
    ContactModel,
    PersonalInfoModel,
    PortfolioModel,
    ProjectModel,
    SynthesizerResponse,
)

__all__ = [
    # Conversation models
    "Message",
    "SendMessageRequest",
    "SelectTagRequest",
    "WorkspaceResponse",
    # Portfolio models
    "ProjectModel",
    "PersonalInfoModel",
    "ContactModel",
    "PortfolioModel",
    "SynthesizerResponse",
]
