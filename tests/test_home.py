from app import create_app


def test_manifests_are_discovered():
    app = create_app("TestingConfig")
    titles = [item["title"] for item in app.config["PLUGIN_MANIFESTS"]]
    assert "Unit Conversion" in titles


def test_config_yml_feeds_plugin_settings():
    app = create_app("TestingConfig")
    settings = app.config["PLUGIN_SETTINGS"]["conversion"]
    assert settings["unit_style"] == "medium"
    assert app.config["SITE_SETTINGS"]["title"] == "Unit Conversion"


def test_unknown_page_renders_not_found():
    client = create_app("TestingConfig").test_client()
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert "Back to the converter" in response.get_data(as_text=True)
    assert response.headers.get("X-Frame-Options") == "DENY"
