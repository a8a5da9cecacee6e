from flask import current_app, render_template


def template_for(view: str) -> str:
    return view + current_app.config["VIEW_SUFFIX"]


def render_view(view: str):
    current_app.logger.debug("resolved view %r", view)
    return render_template(template_for(view))
