"""Server-rendered page for the conversion form."""

from __future__ import annotations

from flask import Blueprint, current_app, render_template, request

from ..core import ConversionForm, load_settings

ui_bp = Blueprint(
    "conversion",
    __name__,
    url_prefix="/conversion",
    template_folder="templates",
)


@ui_bp.get("/")
def index() -> str:
    settings = load_settings(
        current_app.config.get("PLUGIN_SETTINGS", {}).get("conversion", {})
    )
    form = ConversionForm.from_fields(request.args, settings=settings)
    return render_template(
        "conversion/index.html",
        form=form,
        state=form.state,
        categories=form.category_options(),
        units=form.unit_options(),
        output=form.formatted_output(),
    )


blueprints = [ui_bp]


__all__ = ["blueprints", "index"]
