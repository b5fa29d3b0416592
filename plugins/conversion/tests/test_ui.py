from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_home_redirects_to_form():
    client = _client()
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/conversion/")


def test_form_renders_defaults():
    client = _client()
    response = client.get("/conversion/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Unit Conversion" in body
    assert "0 Feet" in body
    assert 'name="previous_category" value="length"' in body
    assert ">Done</button>" in body
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_form_converts_submitted_fields():
    client = _client()
    response = client.get(
        "/conversion/",
        query_string={
            "category": "length",
            "previous_category": "length",
            "source": "kilometer",
            "target": "meter",
            "value": "1",
        },
    )
    body = response.get_data(as_text=True)
    assert "1,000 Meter" in body
    assert 'name="source" value="kilometer" checked' in body
    assert 'name="target" value="meter" checked' in body


def test_category_change_resets_unit_selection():
    client = _client()
    response = client.get(
        "/conversion/",
        query_string={
            "category": "volume",
            "previous_category": "length",
            "source": "kilometer",
            "target": "meter",
            "value": "1",
        },
    )
    body = response.get_data(as_text=True)
    assert "1,000 Milliliters" in body
    assert 'name="source" value="liter" checked' in body
    assert 'name="target" value="milliliter" checked' in body


def test_invalid_text_keeps_default_value():
    client = _client()
    response = client.get("/conversion/", query_string={"value": "twelve"})
    body = response.get_data(as_text=True)
    assert "0 Feet" in body
    assert 'value="0"' in body


def test_value_too_large_for_units_is_not_rendered_as_infinity():
    client = _client()
    response = client.get(
        "/conversion/",
        query_string={
            "category": "length",
            "previous_category": "length",
            "source": "kilometer",
            "target": "meter",
            "value": "1e308",
        },
    )
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "inf Meter" not in body
    assert "0 Meter" in body
