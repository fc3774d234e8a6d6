"""Upgrade page: offer, mock payment, success, and the already-Pro view."""
import gradio as gr

from samanyay import config
from samanyay_app.ui.components import (
    loading_html, pricing_html, feature_cards_html, feature_checklist_html, order_summary_html,
)


def build():
    with gr.Row():
        back_to_dash = gr.Button("← Back to Dashboard", size="sm", scale=0)
        gr.Markdown(f"## {config.APP_TITLE} Pro")

    loading_panel = gr.HTML(loading_html(), visible=True)

    already_group = gr.Group(visible=False)
    with already_group:
        gr.HTML('<div class="sm-pricing"><div class="sm-pricing-crown">&#9819;</div>'
                "<h2>You're already Pro!</h2><p>You have access to all premium features</p></div>")
        already_dash_btn = gr.Button("Back to Dashboard", variant="primary")

    offer_group = gr.Group(visible=False)
    with offer_group:
        gr.HTML(pricing_html())
        upgrade_now_btn = gr.Button("Upgrade Now", variant="primary", size="lg")
        gr.HTML(feature_cards_html())

    paying_group = gr.Group(visible=False)
    with paying_group:
        gr.Markdown("### Complete Payment\nSecure payment processing")
        gr.HTML(order_summary_html())
        pay_btn = gr.Button("Complete Payment", variant="primary", size="lg")
        pay_back_btn = gr.Button("Back")

    success_group = gr.Group(visible=False)
    with success_group:
        gr.HTML('<div class="sm-pricing"><div class="sm-pricing-crown">&#9819;</div>'
                '<h2 style="color:#137333;">Payment Successful!</h2>'
                f"<p>Welcome to {config.APP_TITLE} Pro! You now have access to all premium features.</p></div>")
        gr.HTML(feature_checklist_html())
        success_dash_btn = gr.Button("Go to Dashboard", variant="primary", size="lg")

    return {
        "back_to_dash": back_to_dash,
        "loading_panel": loading_panel,
        "already_group": already_group,
        "already_dash_btn": already_dash_btn,
        "offer_group": offer_group,
        "upgrade_now_btn": upgrade_now_btn,
        "paying_group": paying_group,
        "pay_btn": pay_btn,
        "pay_back_btn": pay_back_btn,
        "success_group": success_group,
        "success_dash_btn": success_dash_btn,
    }
