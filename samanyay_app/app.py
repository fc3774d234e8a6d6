"""
Samanyay: Gradio web application for legal case management.

This is the main entrypoint. Every screen is a thin view over the configured
data platform backend (local SQLite or hosted Supabase); the behaviour behind
each screen lives in `samanyay.flows`.

Pages:
  - Home: Product overview with sign-in / sign-up entry points
  - Login: Email + password sign-in
  - Register: Account creation with client-side validation
  - Dashboard: Account tiles, searchable case grid, New Case form (requires login)
  - Upgrade: Offer -> mock payment -> success, or "already Pro" (requires login)

Navigation uses gr.Group visibility toggling; every route change goes through
the session gate in `samanyay.session`.
"""
import sys
import logging
from pathlib import Path

# Ensure project root is on sys.path when run from samanyay_app/ directly
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import gradio as gr

from samanyay import config
from samanyay.backend.factory import create_backend
from samanyay.flows.auth_forms import login, logout, register
from samanyay.flows.cases import create_case
from samanyay.flows.dashboard import DashboardState, open_dashboard
from samanyay.flows.upgrade import UpgradeState, UpgradeView, complete_payment, open_upgrade
from samanyay.notifications import Notifier
from samanyay.session import GateDecision, Route, SessionContext, gate
from samanyay_app.ui.components import (
    alert_html, case_grid_html, header_html, loading_html, stats_html,
)
from samanyay_app.ui.pages import dashboard as dashboard_page
from samanyay_app.ui.pages import home as home_page
from samanyay_app.ui.pages import login as login_page
from samanyay_app.ui.pages import register as register_page
from samanyay_app.ui.pages import upgrade as upgrade_page
from scripts.init_storage import ensure_storage

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

APP_TITLE = config.APP_TITLE

PAGES = ["loading", "home", "login", "register", "dashboard", "upgrade"]

PROFILE_PENDING_MSG = (
    "Your profile is still being set up. If this persists, sign out and contact support."
)


# ─────────────────────────── CSS Design System ───────────────────────────────

SM_CSS = """
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap');

.gradio-container {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif !important;
    max-width: 1200px !important;
    margin: 0 auto !important;
    background: linear-gradient(180deg, #f8f9fa 0%, #eef1f6 100%) !important;
    min-height: 100vh;
}
button.primary { background: #1a3a6b !important; border: none !important; border-radius: 8px !important; }
button.primary:hover { background: #142d54 !important; }

/* Alerts */
.sm-alert { padding: 12px 16px; border-radius: 8px; font-size: 0.875rem; font-weight: 500; margin: 8px 0; }
.sm-alert-error { background: #fce8e6; color: #c5221f; border: 1px solid #f5c6cb; }
.sm-alert-success { background: #e6f4ea; color: #137333; border: 1px solid #ceead6; }

/* Loading */
.sm-loading { display: flex; align-items: center; justify-content: center; gap: 12px;
              padding: 64px 0; color: #5f6368; font-size: 0.9rem; }
.sm-loading-spinner { width: 28px; height: 28px; border: 3px solid #dadce0; border-top-color: #1a3a6b;
                      border-radius: 50%; animation: sm-spin 0.8s linear infinite; }
@keyframes sm-spin { to { transform: rotate(360deg); } }

/* Hero */
.sm-hero { text-align: center; padding: 48px 16px 24px; }
.sm-hero h1 { font-size: 2.4rem; font-weight: 700; color: #1a3a6b; margin: 12px 0 4px; }
.sm-hero-sub { font-size: 1.1rem; color: #3c4043; }
.sm-logo { width: 48px; height: 48px; margin: 0 auto; border-radius: 12px; background: #1a3a6b;
           color: #fff; font-weight: 700; font-size: 1.5rem; line-height: 48px; }
.sm-muted { color: #5f6368; font-size: 0.85rem; }

/* Header */
.sm-header { display: flex; justify-content: space-between; align-items: center; padding: 12px 4px; }
.sm-brand { font-size: 1.5rem; font-weight: 700; color: #1a3a6b; margin-right: 12px; }
.sm-header-user { text-align: right; }
.sm-header-name { font-weight: 600; color: #202124; }
.sm-header-email { font-size: 0.8rem; color: #5f6368; }

/* Badges */
.sm-badge { display: inline-block; padding: 2px 10px; border-radius: 12px; font-size: 0.75rem; font-weight: 500; }
.sm-badge-muted { background: #f1f3f4; color: #5f6368; }
.sm-badge-pro { background: linear-gradient(90deg, #fbbc04, #e37400); color: #fff; }

/* Stat tiles */
.sm-stats { display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px; margin: 8px 0 16px; }
.sm-stat { background: #fff; border: 1px solid #e0e0e0; border-radius: 12px; padding: 16px 20px; }
.sm-stat-title { font-size: 0.95rem; font-weight: 600; color: #3c4043; margin-bottom: 6px; }
.sm-stat-number { font-size: 2rem; font-weight: 700; color: #1a3a6b; }
.sm-stat-text { font-size: 1.1rem; font-weight: 600; color: #202124; }

/* Case grid */
.sm-case-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(280px, 1fr)); gap: 16px; }
.sm-case-card { background: #fff; border: 1px solid #e0e0e0; border-radius: 12px; padding: 16px; }
.sm-case-card:hover { box-shadow: 0 2px 8px rgba(0,0,0,0.08); }
.sm-case-head { display: flex; justify-content: space-between; align-items: flex-start; gap: 8px; }
.sm-case-title { font-size: 1.05rem; font-weight: 600; color: #202124; }
.sm-case-desc { color: #5f6368; font-size: 0.875rem; margin: 8px 0 12px; }
.sm-case-meta { display: flex; justify-content: space-between; color: #80868b; font-size: 0.8rem; }
.sm-empty { text-align: center; padding: 48px 0; background: #fff; border: 1px solid #e0e0e0; border-radius: 12px; }
.sm-empty-heading { font-size: 1.1rem; font-weight: 600; color: #202124; margin-bottom: 6px; }

/* Pro */
.sm-pricing { text-align: center; padding: 24px 16px; }
.sm-pricing-crown { font-size: 3rem; color: #fbbc04; }
.sm-price { font-size: 2.4rem; font-weight: 700; color: #1a3a6b; }
.sm-price-unit { color: #5f6368; }
.sm-feature-grid { display: grid; grid-template-columns: repeat(2, 1fr); gap: 16px; padding: 16px; }
.sm-feature { background: #fff; border: 1px solid #e0e0e0; border-radius: 12px; padding: 16px; }
.sm-feature p { color: #5f6368; font-size: 0.85rem; margin: 6px 0 0; }
.sm-order { background: #f1f3f4; border-radius: 8px; padding: 16px; margin: 12px 16px; }
.sm-order-row { display: flex; justify-content: space-between; margin-bottom: 4px; }
.sm-checklist { padding: 8px 32px 16px; }
.sm-check { padding: 4px 0; font-size: 0.9rem; }
.sm-check-mark { color: #34a853; font-weight: 700; margin-right: 8px; }
"""

# ─────────────────────────── Backend ──────────────────────────────────────

_backend = None


def get_backend():
    global _backend
    if _backend is None:
        _backend = create_backend()
    return _backend


# ─────────────────────────── State helpers ────────────────────────────────

def _default_state() -> dict:
    return {
        "session": SessionContext(),
        "dashboard": DashboardState(),
        "upgrade": UpgradeState(),
        "page": "loading",
    }


def _reset_screens(st: dict) -> None:
    st["dashboard"] = DashboardState()
    st["upgrade"] = UpgradeState()


def _flush(notifier: Notifier) -> None:
    """Show queued notifications as toasts."""
    for kind, msg in notifier.drain():
        if kind == "success":
            gr.Info(msg)
        else:
            gr.Warning(msg)


def _set_views(page: str) -> tuple:
    return tuple(gr.update(visible=(page == p)) for p in PAGES)


def _dashboard_updates(st: dict) -> tuple:
    """Updates for: loading panel, main group, header, stats, upgrade button, case grid,
    create group, title box, description box, search box."""
    dash: DashboardState = st["dashboard"]
    if not dash.ready:
        msg = PROFILE_PENDING_MSG if dash.profile_missing else "Loading..."
        return (
            gr.update(visible=True, value=loading_html(msg)),
            gr.update(visible=False),
            gr.update(), gr.update(),
            gr.update(visible=False),
            gr.update(),
            gr.update(visible=False),
            gr.update(), gr.update(),
            dash.query,
        )
    profile = dash.profile.profile
    heading, hint = dash.empty_state()
    return (
        gr.update(visible=False),
        gr.update(visible=True),
        header_html(profile, st["session"].user),
        stats_html(profile, len(dash.case_list.cases)),
        gr.update(visible=not profile.is_pro),
        case_grid_html(dash.filtered, heading, hint),
        gr.update(visible=dash.draft.is_open),
        dash.draft.title,
        dash.draft.description,
        dash.query,
    )


def _upgrade_updates(st: dict) -> tuple:
    """Updates for: loading panel, already-Pro, offer, paying, success groups, pay and back
    buttons, header back-to-dashboard button."""
    up: UpgradeState = st["upgrade"]
    view = up.view()
    return (
        gr.update(visible=view is UpgradeView.LOADING),
        gr.update(visible=view is UpgradeView.ALREADY_PRO),
        gr.update(visible=view is UpgradeView.OFFER),
        gr.update(visible=view is UpgradeView.PAYING),
        gr.update(visible=view is UpgradeView.SUCCEEDED),
        gr.update(value="Processing..." if up.processing else "Complete Payment",
                  interactive=not up.processing),
        gr.update(interactive=not up.processing),
        gr.update(interactive=not up.processing),
    )


def _render(st: dict) -> tuple:
    return (st,) + _set_views(st["page"]) + _dashboard_updates(st) + _upgrade_updates(st)


def navigate(route: Route, st: dict) -> tuple:
    """Run the session gate for `route`, load the target screen, and render it."""
    session: SessionContext = st["session"]
    decision = gate(session, route)
    if decision is GateDecision.LOADING:
        st["page"] = "loading"
        return _render(st)

    target = decision if isinstance(decision, Route) else route
    notifier = Notifier()
    if target is Route.DASHBOARD:
        open_dashboard(st["dashboard"], session, get_backend(), notifier)
    elif target is Route.UPGRADE:
        open_upgrade(st["upgrade"], session, get_backend(), notifier)
    st["page"] = target.value
    _flush(notifier)
    return _render(st)


def on_load(st: dict) -> tuple:
    """Initial view: no session survives a page reload, so loading ends signed out."""
    st["session"].start(None)
    return navigate(Route.HOME, st)


# ─────────────────────────── Theme ──────────────────────────────────────

light_theme = gr.themes.Base(
    primary_hue=gr.themes.colors.blue,
    neutral_hue=gr.themes.colors.gray,
    font=["Inter", "-apple-system", "BlinkMacSystemFont", "Segoe UI", "Roboto", "sans-serif"],
)
light_theme.set(
    body_background_fill="#ffffff",
    body_text_color="#202124",
    block_border_color="#e0e0e0",
    input_border_color="#dadce0",
    button_primary_background_fill="#1a3a6b",
    button_primary_text_color="#ffffff",
    shadow_drop="none",
    shadow_drop_lg="none",
)

# ─────────────────────────── Main Blocks app ─────────────────────────────

def main() -> gr.Blocks:
    logger.info("Starting %s with the %s backend", APP_TITLE, config.BACKEND)
    ensure_storage(storage_dir=config.STORAGE_DIR)
    get_backend()

    with gr.Blocks(title=APP_TITLE, theme=light_theme, css=SM_CSS) as demo:
        state = gr.State(_default_state())

        loading_view = gr.Group(visible=True)
        with loading_view:
            gr.HTML(loading_html())

        home_view = gr.Group(visible=False)
        with home_view:
            home = home_page.build()

        login_view = gr.Group(visible=False)
        with login_view:
            lg = login_page.build()

        register_view = gr.Group(visible=False)
        with register_view:
            rg = register_page.build()

        dashboard_view = gr.Group(visible=False)
        with dashboard_view:
            dash = dashboard_page.build()

        upgrade_view = gr.Group(visible=False)
        with upgrade_view:
            up = upgrade_page.build()

        # ═══════════════════════════════════════════════════════════════════
        # ALL VIEWS list (must match PAGES order)
        # ═══════════════════════════════════════════════════════════════════
        all_views = [loading_view, home_view, login_view, register_view, dashboard_view, upgrade_view]

        _dash_outputs = [
            dash["loading_panel"], dash["main_group"], dash["header"], dash["stats"],
            dash["upgrade_btn"], dash["case_grid"], dash["create_group"],
            dash["new_title"], dash["new_desc"], dash["search"],
        ]
        _upgrade_outputs = [
            up["loading_panel"], up["already_group"], up["offer_group"], up["paying_group"],
            up["success_group"], up["pay_btn"], up["pay_back_btn"], up["back_to_dash"],
        ]
        _nav_outputs = [state] + all_views + _dash_outputs + _upgrade_outputs

        # ═══════════════════════════════════════════════════════════════════
        # EVENT HANDLERS
        # ═══════════════════════════════════════════════════════════════════

        def do_login(email: str, pw: str, st: dict):
            notifier = Notifier()
            outcome = login(email.strip(), pw, st["session"], get_backend(), notifier)
            _flush(notifier)
            if outcome.route is None:
                return _render(st) + (alert_html(outcome.error), gr.update())
            _reset_screens(st)
            return navigate(outcome.route, st) + ("", "")

        def do_register(first: str, last: str, email: str, pw: str, confirm: str, st: dict):
            notifier = Notifier()
            outcome = register(first.strip(), last.strip(), email.strip(), pw, confirm,
                               st["session"], get_backend(), notifier)
            _flush(notifier)
            if outcome.route is None:
                return _render(st) + (alert_html(outcome.error), gr.update(), gr.update())
            _reset_screens(st)
            return navigate(outcome.route, st) + ("", "", "")

        def do_logout(st: dict):
            notifier = Notifier()
            outcome = logout(st["session"], get_backend(), notifier)
            _flush(notifier)
            if outcome.route is None:
                return _render(st)
            _reset_screens(st)
            return navigate(outcome.route, st)

        def do_search(query: str, st: dict):
            dash_state: DashboardState = st["dashboard"]
            dash_state.query = query or ""
            heading, hint = dash_state.empty_state()
            return st, case_grid_html(dash_state.filtered, heading, hint)

        def open_create(st: dict):
            st["dashboard"].draft.open()
            return st, gr.update(visible=True)

        def cancel_create(st: dict):
            closed = st["dashboard"].draft.close()
            return st, gr.update(visible=not closed)

        def do_create(title: str, description: str, st: dict):
            dash_state: DashboardState = st["dashboard"]
            dash_state.draft.title = title or ""
            dash_state.draft.description = description or ""
            notifier = Notifier()
            create_case(dash_state.draft, dash_state.case_list, st["session"], get_backend(), notifier)
            _flush(notifier)
            return (st,) + _dashboard_updates(st)

        def start_payment_ui():
            return (
                gr.update(value="Processing...", interactive=False),
                gr.update(interactive=False),
                gr.update(interactive=False),
            )

        def do_pay(st: dict):
            notifier = Notifier()
            complete_payment(st["upgrade"], st["session"], get_backend(), notifier)
            _flush(notifier)
            return (st,) + _upgrade_updates(st)

        def upgrade_step(action: str, st: dict):
            up_state: UpgradeState = st["upgrade"]
            if action == "advance":
                up_state.advance()
            else:
                up_state.back()
            return (st,) + _upgrade_updates(st)

        # ═══════════════════════════════════════════════════════════════════
        # WIRE UP BUTTONS
        # ═══════════════════════════════════════════════════════════════════

        def _go(route: Route):
            return lambda st: navigate(route, st)

        # Home
        home["go_login"].click(_go(Route.LOGIN), inputs=[state], outputs=_nav_outputs)
        home["go_register"].click(_go(Route.REGISTER), inputs=[state], outputs=_nav_outputs)

        # Login / Register
        lg["login_btn"].click(
            do_login,
            inputs=[lg["login_email"], lg["login_pw"], state],
            outputs=_nav_outputs + [lg["login_error"], lg["login_pw"]],
        )
        lg["back_btn"].click(_go(Route.HOME), inputs=[state], outputs=_nav_outputs)
        lg["to_register"].click(_go(Route.REGISTER), inputs=[state], outputs=_nav_outputs)

        rg["register_btn"].click(
            do_register,
            inputs=[rg["first_name"], rg["last_name"], rg["email"], rg["password"], rg["confirm"], state],
            outputs=_nav_outputs + [rg["register_error"], rg["password"], rg["confirm"]],
        )
        rg["back_btn"].click(_go(Route.HOME), inputs=[state], outputs=_nav_outputs)
        rg["to_login"].click(_go(Route.LOGIN), inputs=[state], outputs=_nav_outputs)

        # Dashboard
        dash["logout_btn"].click(do_logout, inputs=[state], outputs=_nav_outputs)
        dash["upgrade_btn"].click(_go(Route.UPGRADE), inputs=[state], outputs=_nav_outputs)
        dash["search"].input(do_search, inputs=[dash["search"], state], outputs=[state, dash["case_grid"]])
        dash["new_case_btn"].click(open_create, inputs=[state], outputs=[state, dash["create_group"]])
        dash["cancel_btn"].click(cancel_create, inputs=[state], outputs=[state, dash["create_group"]])
        dash["new_title"].change(
            lambda t: gr.update(interactive=bool((t or "").strip())),
            inputs=[dash["new_title"]], outputs=[dash["create_btn"]],
        )
        dash["create_btn"].click(
            do_create,
            inputs=[dash["new_title"], dash["new_desc"], state],
            outputs=[state] + _dash_outputs,
        )

        # Upgrade
        for btn in (up["back_to_dash"], up["already_dash_btn"], up["success_dash_btn"]):
            btn.click(_go(Route.DASHBOARD), inputs=[state], outputs=_nav_outputs)
        up["upgrade_now_btn"].click(
            lambda st: upgrade_step("advance", st), inputs=[state], outputs=[state] + _upgrade_outputs,
        )
        up["pay_back_btn"].click(
            lambda st: upgrade_step("back", st), inputs=[state], outputs=[state] + _upgrade_outputs,
        )
        up["pay_btn"].click(
            start_payment_ui, outputs=[up["pay_btn"], up["pay_back_btn"], up["back_to_dash"]],
        ).then(
            do_pay, inputs=[state], outputs=[state] + _upgrade_outputs,
        )

        demo.load(on_load, inputs=[state], outputs=_nav_outputs)

    return demo


if __name__ == "__main__":
    app = main()
    app.launch()
