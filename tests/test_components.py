"""HTML components: case cards, status badges, and dashboard tiles."""
from samanyay.models import Case, Profile
from samanyay_app.ui.components import (
    NO_DESCRIPTION, case_card_html, case_grid_html, stats_html, status_badge_html,
)

from fakes import case_row, profile_row


def test_case_card_without_description():
    html = case_card_html(Case.from_row(case_row("c1", "Smith v. Jones", "")))
    assert "Smith v. Jones" in html
    assert NO_DESCRIPTION == "No description provided"
    assert NO_DESCRIPTION in html
    assert "0 files" in html
    assert "active" in html


def test_case_card_escapes_user_text():
    html = case_card_html(Case.from_row(case_row("c1", "<b>x</b>", "a & b")))
    assert "<b>x</b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "a &amp; b" in html


def test_status_badge_colors():
    assert "#137333" in status_badge_html("active")
    assert "#b06000" in status_badge_html("pending")
    assert status_badge_html("closed").split(">")[0] == status_badge_html("unknown").split(">")[0]


def test_grid_empty_state():
    html = case_grid_html([], "No cases yet", "Create your first legal case to get started")
    assert "No cases yet" in html
    assert "sm-case-card" not in html


def test_stats_tiles():
    html = stats_html(Profile.from_row(profile_row(is_pro=False)), 3)
    assert "Total Cases" in html and ">3<" in html
    assert "Free Member" in html
    assert "Jan 15, 2025" in html
    assert "Pro Member" in stats_html(Profile.from_row(profile_row(is_pro=True)), 0)
