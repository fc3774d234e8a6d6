"""Dashboard page: account tiles, searchable case grid, and the New Case form."""
import gradio as gr

from samanyay_app.ui.components import loading_html


def build():
    """Build dashboard components. Returns dict of key components."""
    loading_panel = gr.HTML(loading_html(), visible=True)

    main_group = gr.Group(visible=False)
    with main_group:
        with gr.Row():
            header = gr.HTML()
            logout_btn = gr.Button("Logout", size="sm", scale=0)
        stats = gr.HTML()
        upgrade_btn = gr.Button("Upgrade", size="sm", variant="primary", visible=False)

        with gr.Row():
            gr.Markdown("## Your Cases")
            new_case_btn = gr.Button("+ New Case", variant="primary", scale=0)
        search = gr.Textbox(label="Search cases...", placeholder="Search by title or description")
        case_grid = gr.HTML()

    create_group = gr.Group(visible=False)
    with create_group:
        gr.Markdown("### Create New Case\nAdd a new legal case to your dashboard")
        new_title = gr.Textbox(label="Case Title *", placeholder="Enter case title")
        new_desc = gr.Textbox(label="Description", placeholder="Enter case description (optional)", lines=4)
        with gr.Row():
            cancel_btn = gr.Button("Cancel")
            create_btn = gr.Button("Create Case", variant="primary")

    return {
        "loading_panel": loading_panel,
        "main_group": main_group,
        "header": header,
        "logout_btn": logout_btn,
        "stats": stats,
        "upgrade_btn": upgrade_btn,
        "new_case_btn": new_case_btn,
        "search": search,
        "case_grid": case_grid,
        "create_group": create_group,
        "new_title": new_title,
        "new_desc": new_desc,
        "cancel_btn": cancel_btn,
        "create_btn": create_btn,
    }
