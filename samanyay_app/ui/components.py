"""
Reusable HTML components for the Samanyay UI.

Rendering functions for the dashboard header and stat tiles, case cards with
status badges, and the Pro pricing and feature blocks. All components follow
the `sm-` CSS classes defined in app.py.
"""
from html import escape
from typing import Optional

from samanyay import config
from samanyay.backend.base import User
from samanyay.flows.upgrade import PRO_FEATURES
from samanyay.models import Case, Profile
from samanyay.util.time import fmt_date

NO_DESCRIPTION = "No description provided"

_STATUS_COLORS = {
    "active": ("#e6f4ea", "#137333", "#ceead6"),
    "pending": ("#fef7e0", "#b06000", "#feefc3"),
    "closed": ("#f1f3f4", "#3c4043", "#dadce0"),
}
_DEFAULT_STATUS_COLOR = _STATUS_COLORS["closed"]


def loading_html(msg: str = "Loading...") -> str:
    return f'<div class="sm-loading"><div class="sm-loading-spinner"></div>{escape(msg)}</div>'


def alert_html(msg: Optional[str], kind: str = "error") -> str:
    if not msg:
        return ""
    return f'<div class="sm-alert sm-alert-{kind}">{escape(msg)}</div>'


def status_badge_html(status: str) -> str:
    bg, fg, border = _STATUS_COLORS.get(status, _DEFAULT_STATUS_COLOR)
    return (
        f'<span class="sm-badge" style="background:{bg};color:{fg};border:1px solid {border};">'
        f"{escape(status)}</span>"
    )


def pro_badge_html() -> str:
    return '<span class="sm-badge sm-badge-pro">&#9819; Pro</span>'


def header_html(profile: Profile, user: Optional[User]) -> str:
    email = escape(user.email) if user else ""
    badge = pro_badge_html() if profile.is_pro else ""
    return f'''
    <div class="sm-header">
      <div><span class="sm-brand">{config.APP_TITLE}</span>
        <span class="sm-badge sm-badge-muted">{config.APP_TAGLINE}</span></div>
      <div class="sm-header-user">
        <div class="sm-header-name">{escape(profile.display_name)}</div>
        <div class="sm-header-email">{email} {badge}</div>
      </div>
    </div>'''


def stats_html(profile: Profile, total_cases: int) -> str:
    """Render the three dashboard tiles: total cases, account type, member since."""
    account = "&#9819; Pro Member" if profile.is_pro else "Free Member"
    tiles = [
        ("Total Cases", f'<span class="sm-stat-number">{total_cases}</span>'),
        ("Account Type", f'<span class="sm-stat-text">{account}</span>'),
        ("Member Since", f'<span class="sm-stat-text">{fmt_date(profile.created_at)}</span>'),
    ]
    parts = [
        f'<div class="sm-stat"><div class="sm-stat-title">{title}</div>{body}</div>'
        for title, body in tiles
    ]
    return f'<div class="sm-stats">{"".join(parts)}</div>'


def case_card_html(case: Case) -> str:
    description = escape(case.description) if case.description else NO_DESCRIPTION
    return f'''
    <div class="sm-case-card">
      <div class="sm-case-head">
        <div class="sm-case-title">{escape(case.title)}</div>
        {status_badge_html(case.status)}
      </div>
      <div class="sm-case-desc">{description}</div>
      <div class="sm-case-meta">
        <span>{case.file_count} files</span>
        <span>{fmt_date(case.created_at)}</span>
      </div>
    </div>'''


def case_grid_html(cases: list[Case], empty_heading: str, empty_hint: str) -> str:
    if not cases:
        return f'''
        <div class="sm-empty">
          <div class="sm-empty-heading">{escape(empty_heading)}</div>
          <p>{escape(empty_hint)}</p>
        </div>'''
    return f'<div class="sm-case-grid">{"".join(case_card_html(c) for c in cases)}</div>'


def pricing_html() -> str:
    return f'''
    <div class="sm-pricing">
      <div class="sm-pricing-crown">&#9819;</div>
      <h2>Upgrade to Pro</h2>
      <p>Unlock premium features for enhanced legal case management</p>
      <div><span class="sm-price">{config.PRO_PRICE_DISPLAY}</span><span class="sm-price-unit">/month</span></div>
      <p class="sm-muted">30-day money-back guarantee</p>
    </div>'''


def feature_cards_html() -> str:
    cards = "".join(
        f'<div class="sm-feature"><strong>{title}</strong><p>{desc}</p></div>'
        for title, desc in PRO_FEATURES
    )
    return f'<div class="sm-feature-grid">{cards}</div>'


def feature_checklist_html() -> str:
    items = "".join(
        f'<div class="sm-check"><span class="sm-check-mark">&#10003;</span>{title}</div>'
        for title, _ in PRO_FEATURES
    )
    return f'<div class="sm-checklist">{items}</div>'


def order_summary_html() -> str:
    price = config.PRO_PRICE_DISPLAY
    return f'''
    <div class="sm-order">
      <div class="sm-order-row"><span>{config.PRO_PLAN_NAME}</span><strong>{price}</strong></div>
      <div class="sm-order-row sm-muted"><span>Tax included</span><span>Total: {price}</span></div>
    </div>
    <div class="sm-muted" style="text-align:center;">
      <p>This is a demo payment form.</p>
      <p>No actual charges will be made.</p>
    </div>'''
