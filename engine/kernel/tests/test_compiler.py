"""
Folio Kernel -- Static Document Compiler Tests

The compiled document must stand on its own: every card, chip and contact
link written out, theme classes baked in, and a small inline script for
tag filtering and the staggered reveal. Absent optional fields leave no
markup behind.

Categories:
  1. Document shell (doctype, title, CDN scripts, reveal CSS)
  2. Header and contact
  3. Chips and cards
  4. Omission of absent fields
  5. Inline script
  6. Determinism and year
  7. Filenames
"""

import re

import pytest

from engine.kernel.compiler import (
    LUCIDE_CDN,
    REVEAL_DELAY_MS,
    REVEAL_STEP_MS,
    TAILWIND_CDN,
    compile_document,
    export_filename,
    slugify,
)
from engine.kernel.themes import resolve_theme

# ============================================================================
# Helpers
# ============================================================================


def assert_contains(html, *fragments):
    """Assert that the HTML output contains all given fragments."""
    for fragment in fragments:
        assert fragment in html, f"Expected to find {fragment!r} in compiled HTML.\nGot (first 2000 chars):\n{html[:2000]}"


def assert_not_contains(html, *fragments):
    """Assert that the HTML output does NOT contain any of the given fragments."""
    for fragment in fragments:
        assert fragment not in html, f"Did NOT expect to find {fragment!r} in compiled HTML."


def assert_order(html, *fragments):
    """Assert that fragments appear in the given order."""
    positions = [html.index(f) for f in fragments]
    assert positions == sorted(positions), f"Out of order: {list(zip(fragments, positions, strict=True))}"


# ============================================================================
# 1. Document shell
# ============================================================================


class TestDocumentShell:
    def test_is_a_complete_document(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert html.startswith("<!DOCTYPE html>")
        assert html.rstrip().endswith("</html>")

    def test_title_from_name(self, tagged_portfolio):
        assert_contains(compile_document(tagged_portfolio, year=2024), "<title>Ada Lovelace - Portfolio</title>")

    def test_loads_styling_and_icons(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, f'<script src="{TAILWIND_CDN}"></script>', f'<script src="{LUCIDE_CDN}"></script>')

    def test_reveal_css_and_sections(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, ".reveal { opacity: 0;", ".reveal.active { opacity: 1;")
        assert html.count(' reveal"') == 3

    def test_body_carries_theme(self, tagged_portfolio):
        t = resolve_theme("modern-dark")
        assert_contains(compile_document(tagged_portfolio, year=2024), f'<body class="{t.wrapper} {t.text} min-h-screen')

    def test_unknown_theme_uses_default_tokens(self, portfolio_factory):
        t = resolve_theme("minimal-light")
        html = compile_document(portfolio_factory(theme="retro-wave"), year=2024)
        assert_contains(html, f'<body class="{t.wrapper} {t.text} min-h-screen', "minimal light")


# ============================================================================
# 2. Header and contact
# ============================================================================


class TestHeader:
    def test_personal_info(self, tagged_portfolio):
        assert_contains(compile_document(tagged_portfolio, year=2024), "Ada Lovelace", "Engineer", "I build things.")

    def test_contact_links(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, 'href="mailto:ada@example.com"', 'href="https://github.com/ada"', 'data-lucide="github"')
        assert_not_contains(html, 'data-lucide="linkedin"', 'data-lucide="twitter"')

    def test_no_contact_no_links(self, portfolio_factory):
        html = compile_document(portfolio_factory(), year=2024)
        assert_not_contains(html, "mailto:", "Get in Touch")

    def test_escapes_user_content(self, portfolio_factory):
        html = compile_document(portfolio_factory(name="</script><b>x</b>"), year=2024)
        assert_not_contains(html, "<b>x</b>")
        # tailwind, lucide, inline behavior
        assert html.count("</script>") == 3


# ============================================================================
# 3. Chips and cards
# ============================================================================


class TestChipsAndCards:
    def test_chip_row(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert re.findall(r'data-filter="([^"]*)"', html) == ["All", "react", "rust", "ui"]
        assert re.findall(r'data-filter="([^"]*)" aria-pressed="true"', html) == ["All"]

    def test_active_chip_classes(self, tagged_portfolio):
        t = resolve_theme("modern-dark")
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, f'aria-pressed="true" class="filter-btn px-5 py-2.5 rounded-full text-sm transition-all duration-300 font-semibold {t.filter_active}"')

    def test_no_tags_no_chip_row(self, portfolio_factory, project_factory):
        html = compile_document(portfolio_factory(projects=[project_factory("Solo")]), year=2024)
        assert_not_contains(html, 'id="filter-container"', "data-filter=")

    def test_literal_all_tag_gives_one_all_chip(self, portfolio_factory, project_factory):
        data = portfolio_factory(projects=[project_factory("A", tags=["All"]), project_factory("B", tags=["x"])])
        html = compile_document(data, year=2024)
        assert re.findall(r'data-filter="([^"]*)"', html) == ["All", "x"]
        assert re.findall(r'data-filter="([^"]*)" aria-pressed="true"', html) == ["All"]

    def test_every_project_written_out(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert html.count('class="project-card ') == 4
        assert_order(html, ">Alpha</h3>", ">Beta</h3>", ">Gamma</h3>", ">Delta</h3>")

    def test_card_tags_as_json_attribute(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, 'data-tags="[&quot;react&quot;, &quot;ui&quot;]"', 'data-tags="[]"')

    def test_card_tag_labels(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, "#react</span>", "#rust</span>", "#ui</span>")

    def test_links_when_present(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, 'href="https://alpha.example.com"', "Live Demo", 'href="https://github.com/ada/beta"', "Source Code")

    def test_card_content_escaped(self, portfolio_factory, project_factory):
        html = compile_document(portfolio_factory(projects=[project_factory("<i>T</i>", tags=["a&b"])]), year=2024)
        assert_contains(html, "&lt;i&gt;T&lt;/i&gt;", "#a&amp;b</span>", 'data-filter="a&amp;b"')
        assert_not_contains(html, "<i>T</i>")


# ============================================================================
# 4. Omission of absent fields
# ============================================================================


class TestOmission:
    def test_no_image_markup_without_image(self, tagged_portfolio):
        assert_not_contains(compile_document(tagged_portfolio, year=2024), "<img")

    def test_image_markup_with_image(self, portfolio_factory, project_factory):
        data = portfolio_factory(projects=[project_factory("Pic", image_url="https://img.example.com/p.png")])
        assert_contains(compile_document(data, year=2024), '<img src="https://img.example.com/p.png" alt="Pic"')

    def test_no_links_placeholder(self, portfolio_factory, project_factory):
        html = compile_document(portfolio_factory(projects=[project_factory("Bare")]), year=2024)
        assert_contains(html, "No links available")
        assert_not_contains(html, "Live Demo", "Source Code")

    def test_demo_only(self, portfolio_factory, project_factory):
        data = portfolio_factory(projects=[project_factory("Demo", demo_url="https://d.example.com")])
        html = compile_document(data, year=2024)
        assert_contains(html, "Live Demo")
        assert_not_contains(html, "Source Code", "No links available")

    def test_no_projects(self, portfolio_factory):
        html = compile_document(portfolio_factory(), year=2024)
        assert_contains(html, 'id="projects-grid"')
        assert_not_contains(html, 'class="project-card ')

    def test_unsafe_urls_dropped(self, portfolio_factory, project_factory):
        project = project_factory(
            "Bad",
            demo_url="javascript:alert(1)",
            repo_url="https://github.com/ada/bad",
            image_url="data:image/svg+xml,<svg onload=alert(1)>",
        )
        html = compile_document(portfolio_factory(projects=[project], twitter="javascript:alert(2)"), year=2024)
        assert_not_contains(html, "javascript:", "data:image", "Live Demo", 'data-lucide="twitter"', "<img")
        assert_contains(html, 'href="https://github.com/ada/bad"', "Source Code")

    def test_only_unsafe_links_shows_no_links_placeholder(self, portfolio_factory, project_factory):
        project = project_factory("Bad", demo_url="javascript:alert(1)")
        html = compile_document(portfolio_factory(projects=[project], github="vbscript:x"), year=2024)
        assert_contains(html, "No links available")
        assert_not_contains(html, "Live Demo", 'data-lucide="github"')


# ============================================================================
# 5. Inline script
# ============================================================================


class TestInlineScript:
    def test_reveal_timing(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, f"i * {REVEAL_STEP_MS});", f"}}, {REVEAL_DELAY_MS});")

    def test_chip_class_literals_baked_in(self, tagged_portfolio):
        t = resolve_theme("modern-dark")
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(
            html,
            'const ALL_FILTER = "All";',
            f'const ACTIVE_CHIP = "filter-btn px-5 py-2.5 rounded-full text-sm transition-all duration-300 font-semibold {t.filter_active}";',
            f'const INACTIVE_CHIP = "filter-btn px-5 py-2.5 rounded-full text-sm transition-all duration-300 font-medium {t.filter_inactive}";',
        )

    def test_filter_reads_data_tags(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=2024)
        assert_contains(html, "JSON.parse(card.getAttribute('data-tags'))", "lucide.createIcons();")

    def test_script_has_no_unrendered_placeholders(self, tagged_portfolio):
        assert_not_contains(compile_document(tagged_portfolio, year=2024), "{{", "}}}")


# ============================================================================
# 6. Determinism and year
# ============================================================================


class TestDeterminism:
    def test_same_input_same_output(self, tagged_portfolio):
        assert compile_document(tagged_portfolio, year=2024) == compile_document(tagged_portfolio, year=2024)

    def test_year_in_footer(self, tagged_portfolio):
        html = compile_document(tagged_portfolio, year=1999)
        assert_contains(html, "&copy; 1999 Ada Lovelace", "modern dark", "Designed by AI")

    def test_default_year_is_current(self, tagged_portfolio):
        from datetime import UTC, datetime

        assert f"&copy; {datetime.now(UTC).year} " in compile_document(tagged_portfolio)


# ============================================================================
# 7. Filenames
# ============================================================================


class TestFilenames:
    @pytest.mark.parametrize(
        ("name", "slug"),
        [
            ("Ada Lovelace", "ada-lovelace"),
            ("  Ada   Lovelace  ", "ada-lovelace"),
            ("Ada\tKing\nLovelace", "ada-king-lovelace"),
            ("GRACE", "grace"),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_slugify(self, name, slug):
        assert slugify(name) == slug

    def test_export_filename(self, portfolio_factory):
        assert export_filename(portfolio_factory(name="Ada Lovelace")) == "ada-lovelace-portfolio.html"

    def test_export_filename_empty_name(self, portfolio_factory):
        assert export_filename(portfolio_factory(name="  ")) == "portfolio.html"

    def test_export_filename_keeps_non_ascii(self, portfolio_factory):
        assert export_filename(portfolio_factory(name="José Núñez")) == "josé-núñez-portfolio.html"
