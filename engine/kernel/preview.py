"""
Folio Kernel — Interactive Preview

The live side of the dual renderer.

  PreviewController  — owns the selected tag for the current portfolio
  render_preview     — pure function: (data, selected) → HTML fragment

The fragment is re-derived from scratch on every state change. Tag chips
post the chosen tag back to the select action, and the controller is the
retained UI state between requests. Card reveal is CSS-only (staggered
animation-delay), so nothing here depends on a client script.

Filtering goes through engine.kernel.tags, the same rules the static
export's inline script implements.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from html import escape as _html_escape

from engine.kernel.links import safe_url
from engine.kernel.tags import ALL, chip_labels, filter_projects, tags_of
from engine.kernel.themes import ThemeTokens, resolve_theme, theme_label
from engine.kernel.types import SOCIAL_CHANNELS, PortfolioData, Project

# Per-card animation delay step (ms)
CARD_STAGGER_MS = 100


@dataclass(frozen=True)
class PreviewActions:
    """Where the preview's affordances point."""

    select_url: str = "/preview/select"
    open_url: str = "/export/open"
    download_url: str = "/export/download"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class PreviewController:
    """
    Selection state scoped to one portfolio object.

    Binding a different object (by identity) resets the selection to ALL.
    Re-binding the same object keeps whatever the user picked.
    """

    def __init__(self, data: PortfolioData | None = None) -> None:
        self.data = data
        self.selected = ALL

    def bind(self, data: PortfolioData | None) -> None:
        if data is self.data:
            return
        self.data = data
        self.selected = ALL

    def select(self, tag: str) -> str:
        self.selected = tag
        return self.selected

    def tags(self) -> list[str]:
        if self.data is None:
            return []
        return tags_of(self.data.projects)

    def visible_projects(self) -> list[Project]:
        if self.data is None:
            return []
        return filter_projects(self.data.projects, self.selected)

    def render(self, actions: PreviewActions | None = None, year: int | None = None) -> str:
        return render_preview(self.data, self.selected, actions=actions, year=year)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

PREVIEW_CSS = """
@keyframes slideUp { from { opacity: 0; transform: translateY(20px); } to { opacity: 1; transform: translateY(0); } }
@keyframes fadeIn { from { opacity: 0; } to { opacity: 1; } }
.animate-slide-up { animation: slideUp 0.6s cubic-bezier(0.2, 0.8, 0.2, 1) forwards; opacity: 0; }
.animate-fade-in { animation: fadeIn 0.8s ease-out forwards; opacity: 0; }
.stagger-1 { animation-delay: 100ms; }
.stagger-2 { animation-delay: 200ms; }
.stagger-3 { animation-delay: 300ms; }
""".strip()


def render_preview(
    data: PortfolioData | None,
    selected: str = ALL,
    actions: PreviewActions | None = None,
    year: int | None = None,
) -> str:
    """
    Render the interactive preview fragment.
    Pure function. No side effects. No IO.
    """
    if data is None:
        return _render_placeholder()

    acts = actions or PreviewActions()
    t = resolve_theme(data.theme)
    if year is None:
        year = datetime.now(UTC).year

    parts: list[str] = []
    parts.append(
        f'<div class="folio-preview h-full w-full overflow-y-auto {t.wrapper} {t.text} '
        f'transition-all duration-700 ease-in-out relative">'
    )
    parts.append(f'  <div class="absolute inset-0 bg-gradient-to-br {t.gradient} opacity-50 pointer-events-none"></div>')
    parts.append(_render_toolbar(t, acts))
    parts.append(f"  <style>{PREVIEW_CSS}</style>")
    parts.append('  <div class="max-w-4xl mx-auto px-8 py-20 space-y-24 relative z-10">')
    parts.append(_render_header(data, t))
    parts.append(_render_projects(data, selected, t, acts))
    parts.append(_render_footer(data, t, year))
    parts.append("  </div>")
    parts.append("</div>")
    return "\n".join(parts)


def _render_placeholder() -> str:
    return "\n".join(
        [
            '<div class="folio-placeholder h-full flex flex-col items-center justify-center text-gray-400 p-8 text-center bg-gray-50/50">',
            '  <div class="w-20 h-20 bg-white rounded-3xl shadow-xl flex items-center justify-center mb-6 animate-bounce">',
            '    <i data-lucide="layout" class="w-10 h-10 text-indigo-400"></i>',
            "  </div>",
            '  <h3 class="text-2xl font-semibold text-gray-700 mb-3">Your Portfolio Preview</h3>',
            '  <p class="max-w-xs text-base text-gray-500">Chat with the AI to generate your personal portfolio website. '
            "It will appear here instantly.</p>",
            "</div>",
        ]
    )


def _render_toolbar(t: ThemeTokens, acts: PreviewActions) -> str:
    return (
        '  <div class="folio-toolbar absolute top-6 right-6 z-50 flex gap-2 animate-fade-in">\n'
        f'    <a href="{escape(acts.open_url)}" target="_blank" rel="noreferrer" title="Open in new tab" '
        f'class="p-3 rounded-xl shadow-lg hover:scale-105 transition-all {t.toolbar_button} border {t.card_border}">'
        '<i data-lucide="monitor-play" class="w-5 h-5"></i></a>\n'
        f'    <a href="{escape(acts.download_url)}" title="Download HTML" '
        f'class="flex items-center gap-2 px-4 py-3 rounded-xl shadow-lg font-semibold hover:scale-105 transition-all {t.button}">'
        '<i data-lucide="download" class="w-5 h-5"></i><span>Export</span></a>\n'
        "  </div>"
    )


def _render_header(data: PortfolioData, t: ThemeTokens) -> str:
    info = data.personal_info
    parts = [
        '    <header class="space-y-8 animate-slide-up">',
        f'      <div class="inline-flex items-center gap-2 px-4 py-1.5 text-xs font-bold tracking-widest uppercase '
        f'rounded-full {t.card_bg} border {t.card_border} shadow-sm">',
        f'        <span class="w-2 h-2 rounded-full {t.status_dot} animate-pulse"></span>',
        "        Available for work",
        "      </div>",
        '      <div class="space-y-6 max-w-2xl">',
        '        <h1 class="text-6xl md:text-7xl font-extrabold tracking-tight leading-tight">',
        f'          Hello, I\'m <br/><span class="bg-clip-text text-transparent bg-gradient-to-r {t.title_gradient}">'
        f"{escape(info.name)}</span>.",
        "        </h1>",
        f'        <p class="text-2xl md:text-3xl {t.text_muted} font-light tracking-wide">{escape(info.role)}</p>',
        f'        <p class="{t.text_muted} text-lg leading-relaxed max-w-lg">{escape(info.bio)}</p>',
        "      </div>",
    ]

    contact_parts = []
    email = data.contact.get("email")
    if email:
        contact_parts.append(
            f'        <a href="mailto:{escape(email)}" class="folio-contact group flex items-center gap-3 px-8 py-4 '
            f'rounded-xl font-semibold transition-all transform hover:-translate-y-1 {t.button}" data-channel="email">'
            '<i data-lucide="mail" class="w-5 h-5"></i> Get in Touch</a>'
        )
    for channel, value in data.contact.present(SOCIAL_CHANNELS):
        link = safe_url(value)
        if link is None:
            continue
        contact_parts.append(
            f'        <a href="{escape(link)}" target="_blank" rel="noreferrer" class="folio-contact p-4 rounded-xl '
            f'border {t.card_border} {t.card_bg} hover:opacity-80 transition-all" data-channel="{channel}">'
            f'<i data-lucide="{channel}" class="w-[22px] h-[22px] {t.accent}"></i></a>'
        )
    if contact_parts:
        parts.append('      <div class="flex flex-wrap gap-4 pt-4 stagger-1 animate-slide-up">')
        parts.extend(contact_parts)
        parts.append("      </div>")

    parts.append("    </header>")
    return "\n".join(parts)


def _render_projects(data: PortfolioData, selected: str, t: ThemeTokens, acts: PreviewActions) -> str:
    parts = [
        '    <section class="space-y-10 animate-slide-up stagger-2">',
        '      <div class="flex flex-col md:flex-row md:items-end justify-between gap-6">',
        '        <div class="space-y-2">',
        f'          <div class="flex items-center gap-2"><i data-lucide="sparkles" class="w-6 h-6 {t.accent}"></i>'
        '<h2 class="text-3xl font-bold tracking-tight">Featured Work</h2></div>',
        f"          <p class=\"{t.text_muted}\">A collection of projects I've worked on.</p>",
        "        </div>",
    ]

    chips = chip_labels(data.projects)
    if chips:
        parts.append(_render_chips(chips, selected, t, acts))
    parts.append("      </div>")

    visible = filter_projects(data.projects, selected)
    parts.append('      <div class="grid md:grid-cols-2 gap-8">')
    for idx, project in enumerate(visible):
        parts.append(_render_card(project, idx, t))
    if not visible:
        parts.append(
            f'        <div class="folio-empty col-span-2 py-20 text-center {t.text_muted} animate-fade-in">'
            f'<p class="text-lg">No projects found for <span class="font-semibold">"{escape(selected)}"</span>.</p></div>'
        )
    parts.append("      </div>")
    parts.append("    </section>")
    return "\n".join(parts)


def _render_chips(chips: list[str], selected: str, t: ThemeTokens, acts: PreviewActions) -> str:
    parts = [f'        <form method="post" action="{escape(acts.select_url)}" class="folio-chips flex flex-wrap gap-2">']
    for tag in chips:
        active = tag == selected
        weight = "font-semibold" if active else "font-medium"
        style = t.filter_active if active else t.filter_inactive
        parts.append(
            f'          <button type="submit" name="tag" value="{escape(tag)}" aria-pressed="{"true" if active else "false"}" '
            f'class="px-5 py-2.5 rounded-full text-sm {weight} transition-all duration-300 {style}">{escape(tag)}</button>'
        )
    parts.append("        </form>")
    return "\n".join(parts)


def _render_card(project: Project, idx: int, t: ThemeTokens) -> str:
    delay = (idx + 1) * CARD_STAGGER_MS
    parts = [
        f'        <div class="folio-card group relative rounded-3xl border {t.card_border} {t.card_bg} hover:shadow-2xl '
        f'transition-all duration-500 flex flex-col h-full animate-slide-up overflow-hidden" '
        f'style="animation-delay: {delay}ms">'
    ]
    image_url = safe_url(project.image_url)
    demo_url = safe_url(project.demo_url)
    repo_url = safe_url(project.repo_url)
    if image_url:
        parts.append(
            '          <div class="h-48 w-full overflow-hidden relative border-b border-gray-100/10">'
            f'<img src="{escape(image_url)}" alt="{escape(project.title)}" '
            'class="w-full h-full object-cover transition-transform duration-700 group-hover:scale-110"></div>'
        )
    parts.append('          <div class="p-8 flex flex-col flex-grow">')
    parts.append(
        '            <div class="flex justify-between items-start mb-6">'
        f'<h3 class="text-2xl font-bold">{escape(project.title)}</h3>'
        f'<div class="p-3 rounded-2xl bg-opacity-5 {t.icon_tile}"><i data-lucide="code" class="w-6 h-6 {t.accent}"></i></div>'
        "</div>"
    )
    parts.append(f'            <p class="{t.text_muted} mb-8 text-base leading-relaxed grow">{escape(project.description)}</p>')
    parts.append('            <div class="mt-auto space-y-6">')
    tag_spans = "".join(
        f'<span class="text-xs font-medium px-3 py-1.5 rounded-lg border {t.card_border} opacity-70">#{escape(tag)}</span>'
        for tag in project.tags
    )
    parts.append(f'              <div class="flex flex-wrap gap-2">{tag_spans}</div>')
    parts.append('              <div class="flex items-center gap-3 pt-4 border-t border-gray-100/10">')
    if demo_url:
        parts.append(
            f'                <a href="{escape(demo_url)}" target="_blank" rel="noreferrer" '
            f'class="flex items-center gap-2 text-sm font-semibold {t.text} hover:opacity-70">'
            '<i data-lucide="external-link" class="w-4 h-4"></i> Live Demo</a>'
        )
    if repo_url:
        parts.append(
            f'                <a href="{escape(repo_url)}" target="_blank" rel="noreferrer" '
            f'class="flex items-center gap-2 text-sm font-semibold {t.text} hover:opacity-70 ml-auto">'
            '<i data-lucide="github" class="w-4 h-4"></i> Source Code</a>'
        )
    if not (demo_url or repo_url):
        parts.append(f'                <span class="text-xs {t.text_muted}">No links available</span>')
    parts.append("              </div>")
    parts.append("            </div>")
    parts.append("          </div>")
    parts.append("        </div>")
    return "\n".join(parts)


def _render_footer(data: PortfolioData, t: ThemeTokens, year: int) -> str:
    return "\n".join(
        [
            f'    <footer class="pt-12 pb-8 border-t {t.card_border} flex flex-col md:flex-row justify-between '
            f'items-center gap-4 {t.text_muted} text-sm animate-fade-in stagger-3">',
            f'      <p class="font-medium">&copy; {year} {escape(data.personal_info.name)}</p>',
            '      <div class="flex gap-8 items-center">',
            '        <span class="flex items-center gap-2 opacity-70"><i data-lucide="palette" class="w-3.5 h-3.5"></i> '
            f"{escape(theme_label(data.theme))}</span>",
            '        <span class="flex items-center gap-2 font-bold bg-gradient-to-r from-indigo-500 to-purple-600 '
            'bg-clip-text text-transparent"><i data-lucide="sparkles" class="w-3.5 h-3.5 text-purple-500"></i> Designed by AI</span>',
            "      </div>",
            "    </footer>",
        ]
    )


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)
