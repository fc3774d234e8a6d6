"""Landing page: product pitch with entry points to sign in and sign up."""
import gradio as gr

from samanyay import config


def build():
    gr.HTML(f'''
    <div class="sm-hero">
      <div class="sm-logo">S</div>
      <h1>{config.APP_TITLE}</h1>
      <p class="sm-hero-sub">{config.APP_TAGLINE} for modern legal practices.</p>
      <p class="sm-muted">Track every matter in one place: create cases, search them instantly,
      and upgrade to Pro for document management and team collaboration.</p>
    </div>''')

    with gr.Row():
        go_login = gr.Button("Sign In", variant="primary", size="lg")
        go_register = gr.Button("Create Account", size="lg")

    return {
        "go_login": go_login,
        "go_register": go_register,
    }
