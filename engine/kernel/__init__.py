"""
Folio Kernel — the pure portfolio engine.

Five components, plus a link guard shared by both renderers:
  themes    — theme id → style tokens (preview/export) and chat panel tokens
  tags      — tag universe + filter, shared by both renderers
  preview   — interactive renderer: (portfolio, selected tag) → HTML fragment
  compiler  — static export: portfolio → standalone HTML document
  merge     — how a synthesizer reply replaces the held portfolio
"""

from engine.kernel.compiler import compile_document, export_filename
from engine.kernel.merge import SynthesizerReply, Workspace, apply_reply, initial_workspace
from engine.kernel.preview import PreviewController, render_preview
from engine.kernel.tags import ALL, filter_projects, tags_of
from engine.kernel.themes import resolve_chat_theme, resolve_theme
from engine.kernel.types import PortfolioData, Project

__all__ = [
    "ALL",
    "PortfolioData",
    "Project",
    "resolve_theme",
    "resolve_chat_theme",
    "tags_of",
    "filter_projects",
    "PreviewController",
    "render_preview",
    "compile_document",
    "export_filename",
    "SynthesizerReply",
    "Workspace",
    "apply_reply",
    "initial_workspace",
]
