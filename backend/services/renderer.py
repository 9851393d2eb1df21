"""
Workspace page renderer.

Server-rendered shell around the kernel's preview fragment: the chat panel
(themed after the portfolio) on the left, the live preview on the right.
Forms post back to the page routes, which redirect here.
"""

from __future__ import annotations

from engine.kernel.merge import Workspace
from engine.kernel.preview import PREVIEW_CSS, PreviewActions, PreviewController, escape
from engine.kernel.themes import ChatTheme, resolve_chat_theme
from engine.kernel.types import DEFAULT_THEME

TAILWIND_CDN = "https://cdn.tailwindcss.com/3.4.16"
LUCIDE_CDN = "https://unpkg.com/lucide@0.469.0/dist/umd/lucide.min.js"

# Poll interval while a reply is in flight (seconds)
PENDING_REFRESH_S = 2


def render_workspace_page(
    ws: Workspace,
    preview: PreviewController,
    actions: PreviewActions | None = None,
    year: int | None = None,
) -> str:
    """
    Render the full workspace page.

    Args:
        ws: Current workspace (messages, portfolio, pending, error)
        preview: Preview controller bound to ws.portfolio
        actions: Where preview affordances point
        year: Footer year (defaults to the current year)

    Returns:
        Full HTML document as string
    """
    theme = ws.portfolio.theme if ws.portfolio is not None else DEFAULT_THEME
    ct = resolve_chat_theme(theme)

    parts: list[str] = []
    parts.append("<!DOCTYPE html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('  <meta charset="UTF-8">')
    parts.append('  <meta name="viewport" content="width=device-width, initial-scale=1.0">')
    if ws.pending:
        parts.append(f'  <meta http-equiv="refresh" content="{PENDING_REFRESH_S}">')
    parts.append("  <title>Folio — Portfolio AI</title>")
    parts.append(f'  <script src="{TAILWIND_CDN}"></script>')
    parts.append(f'  <script src="{LUCIDE_CDN}"></script>')
    parts.append(f"  <style>{PREVIEW_CSS}</style>")
    parts.append("</head>")
    parts.append('<body class="flex h-screen w-full bg-gray-100 font-sans overflow-hidden">')
    parts.append(_render_chat_panel(ws, ct))
    parts.append('  <main class="flex-1 h-full overflow-hidden bg-gray-50 relative hidden lg:block">')
    parts.append(preview.render(actions=actions, year=year))
    parts.append("  </main>")
    parts.append("  <script>")
    parts.append("    lucide.createIcons();")
    parts.append("    var end = document.getElementById('messages-end');")
    parts.append("    if (end) { end.scrollIntoView(); }")
    parts.append("  </script>")
    parts.append("</body>")
    parts.append("</html>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Chat panel
# ---------------------------------------------------------------------------


def _render_chat_panel(ws: Workspace, ct: ChatTheme) -> str:
    parts: list[str] = []
    parts.append(
        f'  <aside class="folio-chat w-full lg:w-[420px] flex flex-col border-r border-gray-200 h-full '
        f'shadow-2xl z-20 transition-colors duration-500 {ct.bg}">'
    )
    parts.append(_render_chat_header(ct))
    parts.append('    <div class="flex-1 overflow-y-auto p-5 space-y-6 scroll-smooth">')
    for msg in ws.messages:
        parts.append(_render_message(msg.role, msg.text, ct))
    if ws.pending:
        parts.append(_render_typing(ct))
    if ws.error:
        parts.append(_render_error(ws.error))
    parts.append('      <div id="messages-end"></div>')
    parts.append("    </div>")
    parts.append(_render_input(ws.pending, ct))
    parts.append("  </aside>")
    return "\n".join(parts)


def _render_chat_header(ct: ChatTheme) -> str:
    return (
        f'    <div class="p-5 border-b flex items-center justify-between backdrop-blur-md z-10 {ct.header_bg}">\n'
        '      <div class="flex items-center gap-3">\n'
        '        <div class="p-2.5 bg-gradient-to-tr from-indigo-500 to-purple-500 rounded-xl shadow-lg">'
        '<i data-lucide="bot" class="w-6 h-6 text-white"></i></div>\n'
        "        <div>\n"
        f'          <h1 class="font-bold text-lg {ct.text}">Portfolio AI</h1>\n'
        '          <div class="flex items-center gap-1.5 opacity-60">'
        '<span class="w-2 h-2 rounded-full bg-green-500 animate-pulse"></span>'
        f'<span class="text-xs font-medium {ct.text}">Online</span></div>\n'
        "        </div>\n"
        "      </div>\n"
        "    </div>"
    )


def _render_message(role: str, text: str, ct: ChatTheme) -> str:
    is_user = role == "user"
    justify = "justify-end" if is_user else "justify-start"
    direction = "flex-row-reverse" if is_user else "flex-row"
    avatar = ct.avatar_user if is_user else ct.avatar_bot
    icon = "user" if is_user else "zap"
    bubble = (
        f"{ct.user_bubble} border-transparent rounded-2xl rounded-tr-sm"
        if is_user
        else f"{ct.bot_bubble} rounded-2xl rounded-tl-sm"
    )
    return (
        f'      <div class="folio-message flex w-full mb-6 animate-slide-up {justify}" data-role="{role}">\n'
        f'        <div class="flex max-w-[85%] {direction} items-end gap-3">\n'
        f'          <div class="w-8 h-8 rounded-full flex items-center justify-center shrink-0 shadow-sm text-white {avatar}">'
        f'<i data-lucide="{icon}" class="w-3.5 h-3.5"></i></div>\n'
        f'          <div class="relative px-5 py-3.5 text-sm leading-relaxed shadow-sm border whitespace-pre-wrap {bubble}">'
        f"{escape(text)}</div>\n"
        "        </div>\n"
        "      </div>"
    )


def _render_typing(ct: ChatTheme) -> str:
    dots = "".join(
        f'<span class="w-1.5 h-1.5 bg-current rounded-full animate-bounce{delay}"></span>'
        for delay in ("", " [animation-delay:0.2s]", " [animation-delay:0.4s]")
    )
    return (
        '      <div class="folio-typing flex w-full mb-6 justify-start animate-pulse">\n'
        '        <div class="flex flex-row items-end gap-3">\n'
        f'          <div class="w-8 h-8 rounded-full flex items-center justify-center shrink-0 {ct.avatar_bot}">'
        '<i data-lucide="zap" class="w-3.5 h-3.5 text-white"></i></div>\n'
        f'          <div class="px-5 py-4 {ct.bot_bubble} rounded-2xl rounded-tl-sm flex gap-1 items-center">{dots}</div>\n'
        "        </div>\n"
        "      </div>"
    )


def _render_error(error: str) -> str:
    return (
        '      <div class="folio-error p-4 rounded-xl bg-red-50 text-red-600 text-sm border border-red-100 '
        'flex gap-2 items-center" role="alert">\n'
        f'        <i data-lucide="zap" class="w-4 h-4"></i> <span class="flex-1">{escape(error)}</span>\n'
        '        <form method="post" action="/chat/dismiss">'
        '<button type="submit" class="text-red-400 hover:text-red-600" aria-label="Dismiss">'
        '<i data-lucide="x" class="w-4 h-4"></i></button></form>\n'
        "      </div>"
    )


def _render_input(pending: bool, ct: ChatTheme) -> str:
    disabled = " disabled" if pending else ""
    icon = "refresh-ccw" if pending else "arrow-up-right"
    spin = " animate-spin" if pending else ""
    return (
        f'    <form method="post" action="/chat" class="p-5 border-t {ct.bg} border-opacity-50">\n'
        '      <div class="flex items-center gap-2 p-1.5 pr-2 rounded-[24px] bg-white border shadow-sm '
        f'transition-all duration-300 ring-2 ring-transparent {ct.input_ring}">\n'
        '        <input type="text" name="message" placeholder="Describe your portfolio..." autocomplete="off" '
        f'maxlength="10000" class="flex-1 px-4 py-3 bg-transparent outline-none text-gray-800 placeholder-gray-400 min-w-0"{disabled}>\n'
        '        <button type="submit" class="p-3 rounded-full text-white shadow-md transition-all duration-200 '
        f'disabled:opacity-50 disabled:cursor-not-allowed transform active:scale-95 {ct.send_button}"{disabled}>'
        f'<i data-lucide="{icon}" class="w-5 h-5{spin}"></i></button>\n'
        "      </div>\n"
        "    </form>"
    )
