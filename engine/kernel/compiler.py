"""
Folio Kernel — Static Document Compiler

Pure function: (portfolio, year?) → standalone HTML string
No AI. No IO. Deterministic: same input → same output, always.

The document carries everything it needs at view time:
  - theme tokens resolved here and baked into class attributes and script literals
  - every project card, tag chip and contact link written out literally
  - an inline script for tag filtering and the staggered section reveal

The only external references are the versioned Tailwind and lucide builds
and the Inter web font. The footer year is the one wall-clock value; it is
read once per call (or passed in) and inlined as a literal.

Absent optional fields drop their markup entirely. Nothing is rendered and
then hidden.
"""

from __future__ import annotations

import json
import re
from datetime import UTC, datetime
from html import escape as _html_escape
from typing import Any

import chevron

from engine.kernel.links import safe_url
from engine.kernel.tags import ALL, chip_labels
from engine.kernel.themes import ThemeTokens, resolve_theme, theme_label
from engine.kernel.types import SOCIAL_CHANNELS, PortfolioData, Project

TAILWIND_CDN = "https://cdn.tailwindcss.com/3.4.16"
LUCIDE_CDN = "https://unpkg.com/lucide@0.469.0/dist/umd/lucide.min.js"
FONT_CSS = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap"

# Staggered reveal: first section after REVEAL_DELAY_MS, then one every REVEAL_STEP_MS
REVEAL_DELAY_MS = 100
REVEAL_STEP_MS = 150

FILENAME_SUFFIX = "-portfolio"
FILENAME_EXTENSION = ".html"

CHIP_BASE = "filter-btn px-5 py-2.5 rounded-full text-sm transition-all duration-300"

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compile_document(data: PortfolioData, year: int | None = None) -> str:
    """
    Compile a complete, self-contained HTML document.
    Pure function. No side effects. No IO.
    """
    t = resolve_theme(data.theme)
    if year is None:
        year = datetime.now(UTC).year

    parts: list[str] = []
    parts.append("<!DOCTYPE html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('  <meta charset="UTF-8">')
    parts.append('  <meta name="viewport" content="width=device-width, initial-scale=1.0">')
    parts.append(f"  <title>{escape(data.personal_info.name)} - Portfolio</title>")
    parts.append(f'  <script src="{TAILWIND_CDN}"></script>')
    parts.append(f'  <script src="{LUCIDE_CDN}"></script>')
    parts.append("  <style>")
    parts.append(f"    @import url('{FONT_CSS}');")
    parts.append("    body { font-family: 'Inter', sans-serif; }")
    parts.append("    .reveal { opacity: 0; transform: translateY(20px); transition: all 0.6s ease-out; }")
    parts.append("    .reveal.active { opacity: 1; transform: translateY(0); }")
    parts.append("  </style>")
    parts.append("</head>")
    parts.append(f'<body class="{t.wrapper} {t.text} min-h-screen relative">')
    parts.append(f'  <div class="fixed inset-0 bg-gradient-to-br {t.gradient} opacity-50 pointer-events-none -z-10"></div>')
    parts.append('  <div class="max-w-4xl mx-auto px-8 py-20 space-y-24">')
    parts.append(_compile_header(data, t))
    parts.append(_compile_projects(data, t))
    parts.append(_compile_footer(data, t, year))
    parts.append("  </div>")
    parts.append("  <script>")
    parts.append(_compile_script(t))
    parts.append("  </script>")
    parts.append("</body>")
    parts.append("</html>")

    return "\n".join(parts)


def slugify(name: str) -> str:
    """Lowercase, with whitespace runs collapsed to a single hyphen."""
    return _WHITESPACE_RE.sub("-", name.strip()).lower()


def export_filename(data: PortfolioData) -> str:
    """Download name for the compiled document, e.g. "ada-lovelace-portfolio.html"."""
    slug = slugify(data.personal_info.name)
    if not slug:
        return f"portfolio{FILENAME_EXTENSION}"
    return f"{slug}{FILENAME_SUFFIX}{FILENAME_EXTENSION}"


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _compile_header(data: PortfolioData, t: ThemeTokens) -> str:
    info = data.personal_info
    parts = [
        '    <header class="space-y-8 reveal">',
        f'      <div class="inline-flex items-center gap-2 px-4 py-1.5 text-xs font-bold tracking-widest uppercase '
        f'rounded-full {t.card_bg} border {t.card_border} shadow-sm backdrop-blur-sm">',
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

    email = data.contact.get("email")
    socials = []
    for channel, value in data.contact.present(SOCIAL_CHANNELS):
        link = safe_url(value)
        if link is not None:
            socials.append((channel, link))
    if email or socials:
        parts.append('      <div class="flex flex-wrap gap-4 pt-4">')
        if email:
            parts.append(
                f'        <a href="mailto:{escape(email)}" class="group flex items-center gap-3 px-8 py-4 rounded-xl '
                f'font-semibold transition-all transform hover:-translate-y-1 hover:scale-105 active:scale-95 {t.button}">'
                '<i data-lucide="mail" class="w-5 h-5 group-hover:animate-bounce"></i> Get in Touch</a>'
            )
        if socials:
            parts.append('        <div class="flex gap-3">')
            for channel, link in socials:
                parts.append(
                    f'          <a href="{escape(link)}" target="_blank" rel="noreferrer" class="p-4 rounded-xl border '
                    f'{t.card_border} {t.card_bg} hover:opacity-80 transition-all transform hover:-translate-y-1 '
                    f'hover:shadow-md group"><i data-lucide="{channel}" class="w-[22px] h-[22px] transition-transform '
                    f'group-hover:scale-110 {t.accent}"></i></a>'
                )
            parts.append("        </div>")
        parts.append("      </div>")

    parts.append("    </header>")
    return "\n".join(parts)


CHIP_TEMPLATE = (
    '          <button type="button" data-filter="{{tag}}" aria-pressed="{{pressed}}" class="{{classes}}">{{tag}}</button>'
)

CARD_TEMPLATE = """\
          <div class="project-card group relative rounded-3xl border {{card_border}} {{card_bg}} hover:shadow-2xl transition-all duration-500 hover:-translate-y-2 flex flex-col h-full overflow-hidden" data-tags="{{tags_json}}">
{{#has_image}}
            <div class="h-48 w-full overflow-hidden relative border-b border-gray-100/10">
              <img src="{{image_url}}" alt="{{title}}" class="w-full h-full object-cover transition-transform duration-700 group-hover:scale-110">
            </div>
{{/has_image}}
            <div class="p-8 flex flex-col flex-grow">
              <div class="flex justify-between items-start mb-6">
                <h3 class="text-2xl font-bold group-hover:text-indigo-500 transition-colors">{{title}}</h3>
                <div class="p-3 rounded-2xl bg-opacity-5 {{icon_tile}} group-hover:scale-110 transition-transform duration-300"><i data-lucide="code" class="w-6 h-6 {{accent}}"></i></div>
              </div>
              <p class="{{text_muted}} mb-8 text-base leading-relaxed grow">{{description}}</p>
              <div class="mt-auto space-y-6">
                <div class="flex flex-wrap gap-2">
{{#tags}}
                  <span class="text-xs font-medium px-3 py-1.5 rounded-lg border {{card_border}} bg-opacity-50 opacity-70 group-hover:opacity-100 transition-opacity">#{{.}}</span>
{{/tags}}
                </div>
                <div class="flex items-center gap-3 pt-4 border-t border-gray-100/10">
{{#has_demo}}
                  <a href="{{demo_url}}" target="_blank" rel="noreferrer" class="flex items-center gap-2 text-sm font-semibold {{text}} hover:opacity-70 transition-opacity"><i data-lucide="external-link" class="w-4 h-4"></i> Live Demo</a>
{{/has_demo}}
{{#has_repo}}
                  <a href="{{repo_url}}" target="_blank" rel="noreferrer" class="flex items-center gap-2 text-sm font-semibold {{text}} hover:opacity-70 transition-opacity ml-auto"><i data-lucide="github" class="w-4 h-4"></i> Source Code</a>
{{/has_repo}}
{{^has_links}}
                  <span class="text-xs {{text_muted}}">No links available</span>
{{/has_links}}
                </div>
              </div>
            </div>
          </div>
"""


def _compile_projects(data: PortfolioData, t: ThemeTokens) -> str:
    parts = [
        '    <section class="space-y-10 reveal">',
        '      <div class="flex flex-col md:flex-row md:items-end justify-between gap-6">',
        '        <div class="space-y-2">',
        f'          <div class="flex items-center gap-2"><i data-lucide="sparkles" class="w-6 h-6 {t.accent}"></i>'
        '<h2 class="text-3xl font-bold tracking-tight">Featured Work</h2></div>',
        f"          <p class=\"{t.text_muted}\">A collection of projects I've worked on.</p>",
        "        </div>",
    ]

    chips = chip_labels(data.projects)
    if chips:
        parts.append('        <div class="flex flex-wrap gap-2" id="filter-container">')
        for tag in chips:
            parts.append(chevron.render(CHIP_TEMPLATE, _chip_context(tag, tag == ALL, t)))
        parts.append("        </div>")
    parts.append("      </div>")

    parts.append('      <div class="grid md:grid-cols-2 gap-8" id="projects-grid">')
    for project in data.projects:
        parts.append(chevron.render(CARD_TEMPLATE, _card_context(project, t)).rstrip("\n"))
    parts.append("      </div>")
    parts.append("    </section>")
    return "\n".join(parts)


def _chip_context(tag: str, active: bool, t: ThemeTokens) -> dict[str, Any]:
    return {
        "tag": tag,
        "pressed": "true" if active else "false",
        "classes": _chip_classes(active, t),
    }


def _chip_classes(active: bool, t: ThemeTokens) -> str:
    if active:
        return f"{CHIP_BASE} font-semibold {t.filter_active}"
    return f"{CHIP_BASE} font-medium {t.filter_inactive}"


def _card_context(project: Project, t: ThemeTokens) -> dict[str, Any]:
    image_url = safe_url(project.image_url)
    demo_url = safe_url(project.demo_url)
    repo_url = safe_url(project.repo_url)
    return {
        "title": project.title,
        "description": project.description,
        "tags": list(project.tags),
        "tags_json": json.dumps(list(project.tags), ensure_ascii=False),
        "has_image": bool(image_url),
        "image_url": image_url or "",
        "has_demo": bool(demo_url),
        "demo_url": demo_url or "",
        "has_repo": bool(repo_url),
        "repo_url": repo_url or "",
        "has_links": bool(demo_url or repo_url),
        "card_border": t.card_border,
        "card_bg": t.card_bg,
        "icon_tile": t.icon_tile,
        "accent": t.accent,
        "text": t.text,
        "text_muted": t.text_muted,
    }


def _compile_footer(data: PortfolioData, t: ThemeTokens, year: int) -> str:
    return "\n".join(
        [
            f'    <footer class="pt-12 pb-8 border-t {t.card_border} flex flex-col md:flex-row justify-between '
            f'items-center gap-4 {t.text_muted} text-sm reveal">',
            f'      <p class="font-medium">&copy; {year} {escape(data.personal_info.name)}</p>',
            '      <div class="flex gap-8 items-center">',
            '        <span class="flex items-center gap-2 opacity-70 hover:opacity-100 transition-opacity cursor-default">'
            f'<i data-lucide="palette" class="w-3.5 h-3.5"></i> {escape(theme_label(data.theme))}</span>',
            '        <span class="flex items-center gap-2 font-bold bg-gradient-to-r from-indigo-500 to-purple-600 '
            'bg-clip-text text-transparent"><i data-lucide="sparkles" class="w-3.5 h-3.5 text-purple-500"></i> Designed by AI</span>',
            "      </div>",
            "    </footer>",
        ]
    )


# ---------------------------------------------------------------------------
# Inline behavior
# ---------------------------------------------------------------------------

SCRIPT_TEMPLATE = """\
    lucide.createIcons();

    document.addEventListener('DOMContentLoaded', () => {
      const reveals = document.querySelectorAll('.reveal');
      setTimeout(() => {
        reveals.forEach((el, i) => {
          setTimeout(() => el.classList.add('active'), i * {{step_ms}});
        });
      }, {{delay_ms}});
    });

    const ALL_FILTER = {{{all_json}}};
    const ACTIVE_CHIP = {{{active_json}}};
    const INACTIVE_CHIP = {{{inactive_json}}};
    const filterBtns = document.querySelectorAll('.filter-btn');
    const cards = document.querySelectorAll('.project-card');

    filterBtns.forEach(btn => {
      btn.addEventListener('click', () => {
        filterBtns.forEach(b => {
          const active = b === btn;
          b.className = active ? ACTIVE_CHIP : INACTIVE_CHIP;
          b.setAttribute('aria-pressed', active ? 'true' : 'false');
        });
        const filter = btn.getAttribute('data-filter');
        cards.forEach(card => {
          const tags = JSON.parse(card.getAttribute('data-tags'));
          if (filter === ALL_FILTER || tags.includes(filter)) {
            card.style.display = 'flex';
            setTimeout(() => card.style.opacity = '1', 50);
          } else {
            card.style.display = 'none';
            card.style.opacity = '0';
          }
        });
      });
    });"""


def _compile_script(t: ThemeTokens) -> str:
    context = {
        "step_ms": REVEAL_STEP_MS,
        "delay_ms": REVEAL_DELAY_MS,
        "all_json": _js_string(ALL),
        "active_json": _js_string(_chip_classes(True, t)),
        "inactive_json": _js_string(_chip_classes(False, t)),
    }
    return chevron.render(SCRIPT_TEMPLATE, context)


def _js_string(value: str) -> str:
    """JSON-encode a string for a script literal, safe against a closing </script>."""
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)
