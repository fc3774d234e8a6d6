"""Sign-in page."""
import gradio as gr


def build():
    back_btn = gr.Button("← Back to Home", size="sm")
    gr.Markdown("## Welcome back\nSign in to your account to continue")

    login_error = gr.HTML()
    login_email = gr.Textbox(label="Email", placeholder="name@example.com")
    login_pw = gr.Textbox(label="Password", type="password")
    login_btn = gr.Button("Sign In", variant="primary")
    to_register = gr.Button("Don't have an account? Sign up", size="sm")

    return {
        "back_btn": back_btn,
        "login_error": login_error,
        "login_email": login_email,
        "login_pw": login_pw,
        "login_btn": login_btn,
        "to_register": to_register,
    }
