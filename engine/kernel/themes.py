"""
Folio Kernel — Theme Token Resolvers

Two independent, total lookups keyed by the same theme identifier:

  resolve_theme(theme)       → ThemeTokens  (portfolio preview + static export)
  resolve_chat_theme(theme)  → ChatTheme    (conversation panel)

The token values are utility-class strings for the Tailwind styling system.
Both renderers consume ThemeTokens; only the chat panel consumes ChatTheme.
An identifier outside THEMES resolves to the DEFAULT_THEME bundle. There is
no error path.
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.kernel.types import DEFAULT_THEME, THEMES


@dataclass(frozen=True)
class ThemeTokens:
    wrapper: str
    text: str
    text_muted: str
    accent: str
    card_bg: str
    card_border: str
    button: str
    filter_active: str
    filter_inactive: str
    gradient: str
    title_gradient: str
    status_dot: str
    icon_tile: str
    toolbar_button: str


@dataclass(frozen=True)
class ChatTheme:
    user_bubble: str
    bot_bubble: str
    avatar_user: str
    avatar_bot: str
    input_ring: str
    send_button: str
    bg: str
    header_bg: str
    text: str


_LIGHT_TOOLBAR = "bg-white text-gray-700 hover:bg-gray-50"

THEME_TOKENS: dict[str, ThemeTokens] = {
    "minimal-light": ThemeTokens(
        wrapper="bg-white",
        text="text-gray-900",
        text_muted="text-gray-500",
        accent="text-gray-900",
        card_bg="bg-gray-50",
        card_border="border-gray-200",
        button="bg-gray-900 text-white hover:bg-gray-800 hover:shadow-lg",
        filter_active="bg-gray-900 text-white shadow-md",
        filter_inactive="bg-gray-100 text-gray-600 hover:bg-gray-200",
        gradient="from-gray-50 to-white",
        title_gradient="from-gray-900 to-gray-600",
        status_dot="bg-green-500",
        icon_tile="bg-black",
        toolbar_button=_LIGHT_TOOLBAR,
    ),
    "modern-dark": ThemeTokens(
        wrapper="bg-gray-950",
        text="text-gray-100",
        text_muted="text-gray-400",
        accent="text-indigo-400",
        card_bg="bg-gray-900/80 backdrop-blur-sm",
        card_border="border-gray-800",
        button="bg-indigo-600 text-white hover:bg-indigo-500 hover:shadow-indigo-500/25 hover:shadow-lg",
        filter_active="bg-indigo-600 text-white shadow-indigo-900/50 shadow-lg",
        filter_inactive="bg-gray-800 text-gray-400 hover:bg-gray-700",
        gradient="from-gray-900 via-gray-950 to-black",
        title_gradient="from-indigo-400 to-cyan-400",
        status_dot="bg-green-400",
        icon_tile="bg-white",
        toolbar_button="bg-gray-800 text-white hover:bg-gray-700",
    ),
    "professional-blue": ThemeTokens(
        wrapper="bg-slate-50",
        text="text-slate-900",
        text_muted="text-slate-600",
        accent="text-blue-600",
        card_bg="bg-white shadow-sm",
        card_border="border-blue-100",
        button="bg-blue-600 text-white hover:bg-blue-700 hover:shadow-blue-200 hover:shadow-xl",
        filter_active="bg-blue-600 text-white shadow-blue-200 shadow-md",
        filter_inactive="bg-white text-slate-600 border border-slate-200 hover:border-blue-300 hover:text-blue-600",
        gradient="from-slate-50 to-blue-50/30",
        title_gradient="from-blue-700 to-blue-500",
        status_dot="bg-green-500",
        icon_tile="bg-black",
        toolbar_button=_LIGHT_TOOLBAR,
    ),
    "creative-purple": ThemeTokens(
        wrapper="bg-purple-50",
        text="text-gray-900",
        text_muted="text-gray-600",
        accent="text-purple-600",
        card_bg="bg-white/70 backdrop-blur-md shadow-sm",
        card_border="border-purple-100",
        button="bg-purple-600 text-white hover:bg-purple-700 hover:shadow-purple-200 hover:shadow-xl",
        filter_active="bg-purple-600 text-white shadow-purple-200 shadow-lg",
        filter_inactive="bg-white/80 text-purple-700 border border-purple-100 hover:bg-white",
        gradient="from-fuchsia-50 via-purple-50 to-indigo-50",
        title_gradient="from-purple-600 to-pink-500",
        status_dot="bg-green-500",
        icon_tile="bg-black",
        toolbar_button=_LIGHT_TOOLBAR,
    ),
}

CHAT_THEMES: dict[str, ChatTheme] = {
    "minimal-light": ChatTheme(
        user_bubble="bg-gray-900 text-white shadow-gray-500/20",
        bot_bubble="bg-white border-gray-200 text-gray-800",
        avatar_user="bg-gray-800",
        avatar_bot="bg-gray-600",
        input_ring="focus-within:ring-gray-400/40",
        send_button="bg-gray-900 hover:bg-black",
        bg="bg-white",
        header_bg="bg-white/90 border-gray-100",
        text="text-gray-900",
    ),
    "modern-dark": ChatTheme(
        user_bubble="bg-indigo-600 text-white shadow-indigo-500/20",
        bot_bubble="bg-gray-800 border-gray-700 text-gray-200",
        avatar_user="bg-indigo-500",
        avatar_bot="bg-emerald-500",
        input_ring="focus-within:ring-indigo-500/50",
        send_button="bg-indigo-600 hover:bg-indigo-500",
        bg="bg-gray-900",
        header_bg="bg-gray-900/80 border-gray-800",
        text="text-gray-100",
    ),
    "professional-blue": ChatTheme(
        user_bubble="bg-blue-600 text-white shadow-blue-500/20",
        bot_bubble="bg-white border-blue-100 text-slate-800",
        avatar_user="bg-blue-500",
        avatar_bot="bg-sky-500",
        input_ring="focus-within:ring-blue-500/40",
        send_button="bg-blue-600 hover:bg-blue-700",
        bg="bg-slate-50",
        header_bg="bg-white/80 border-slate-200",
        text="text-slate-900",
    ),
    "creative-purple": ChatTheme(
        user_bubble="bg-gradient-to-r from-fuchsia-600 to-purple-600 text-white shadow-purple-500/20",
        bot_bubble="bg-white border-purple-100 text-gray-800",
        avatar_user="bg-fuchsia-500",
        avatar_bot="bg-purple-500",
        input_ring="focus-within:ring-purple-500/40",
        send_button="bg-purple-600 hover:bg-purple-500",
        bg="bg-purple-50/50",
        header_bg="bg-white/80 border-purple-100",
        text="text-gray-900",
    ),
}


def normalize_theme(theme: str | None) -> str:
    """Return `theme` if it is one of THEMES, otherwise DEFAULT_THEME."""
    if theme in THEMES:
        return theme  # type: ignore[return-value]
    return DEFAULT_THEME


def resolve_theme(theme: str | None) -> ThemeTokens:
    return THEME_TOKENS[normalize_theme(theme)]


def resolve_chat_theme(theme: str | None) -> ChatTheme:
    return CHAT_THEMES[normalize_theme(theme)]


def theme_label(theme: str | None) -> str:
    """Footer label: "modern-dark" → "modern dark"."""
    return normalize_theme(theme).replace("-", " ", 1)
