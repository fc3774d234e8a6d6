"""Create Account page."""
import gradio as gr


def build():
    back_btn = gr.Button("← Back to Home", size="sm")
    gr.Markdown("## Create your account\nStart managing your legal cases today")

    register_error = gr.HTML()
    with gr.Row():
        first_name = gr.Textbox(label="First name")
        last_name = gr.Textbox(label="Last name")
    email = gr.Textbox(label="Email", placeholder="name@example.com")
    password = gr.Textbox(label="Password", type="password")
    confirm = gr.Textbox(label="Confirm password", type="password")
    register_btn = gr.Button("Create Account", variant="primary")
    to_login = gr.Button("Already have an account? Sign in", size="sm")

    return {
        "back_btn": back_btn,
        "register_error": register_error,
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "password": password,
        "confirm": confirm,
        "register_btn": register_btn,
        "to_login": to_login,
    }
