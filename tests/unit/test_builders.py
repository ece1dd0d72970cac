"""
test_builders.py - HTML attribute and plain form element builders
"""

from types import SimpleNamespace

import pytest

from LenderPortal.html import FormBuilder, HtmlBuilder

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def html() -> HtmlBuilder:
    return HtmlBuilder()


@pytest.fixture
def old_input() -> dict:
    return {}


@pytest.fixture
def form(html, old_input) -> FormBuilder:
    def fake_url_for(endpoint, **params):
        query = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
        return f"/{endpoint.replace('.', '/')}" + (f"?{query}" if query else "")

    return FormBuilder(
        html,
        url_for=fake_url_for,
        csrf_token=lambda: "tok123",
        old_input=lambda: old_input,
        current_url=lambda: "/current",
    )


# =============================================================================
# HtmlBuilder
# =============================================================================


class TestAttributes:
    def test_sorted_and_escaped(self, html):
        assert html.attributes({"name": "a", "class": 'x"y'}) == 'class="x&#34;y" name="a"'

    def test_none_dropped_and_true_bare(self, html):
        assert html.attributes({"id": None, "required": True, "disabled": False}) == "required"

    def test_empty(self, html):
        assert html.attributes({}) == ""
        assert html.attributes(None) == ""


# =============================================================================
# FormBuilder.open / model / close
# =============================================================================


class TestOpen:
    def test_defaults_to_post_current_url_with_token(self, form):
        html = form.open()

        assert html == (
            '<form accept-charset="UTF-8" action="/current" method="POST">'
            '<input name="csrf_token" type="hidden" value="tok123">'
        )

    def test_get_has_no_token(self, form):
        html = form.open(method="get", url="/search")

        assert 'method="GET"' in html
        assert 'action="/search"' in html
        assert "csrf_token" not in html

    def test_route_and_files(self, form):
        html = form.open(route="lender.post_edit_profile", files=True, **{"class": "form-horizontal"})

        assert 'action="/lender/post_edit_profile"' in html
        assert 'enctype="multipart/form-data"' in html
        assert 'class="form-horizontal"' in html
        assert "route=" not in html
        assert "files=" not in html

    def test_route_with_parameters(self, form):
        html = form.open(route=["lender.show", {"lender_id": 7}])

        assert 'action="/lender/show?lender_id=7"' in html

    def test_route_without_url_for_raises(self, html):
        with pytest.raises(RuntimeError):
            FormBuilder(html).open(route="lender.edit_profile")

    def test_close_resets_model_and_labels(self, form):
        form.model({"username": "amara"})
        form.label("username")

        assert form.close() == "</form>"
        assert form.model_data is None
        assert form.labels == set()


# =============================================================================
# Value resolution
# =============================================================================


class TestValues:
    def test_model_value_from_mapping(self, form):
        form.model({"username": "amara"})

        assert 'value="amara"' in form.text("username")

    def test_model_value_from_object(self, form):
        form.model(SimpleNamespace(first_name="Amara"))

        assert 'value="Amara"' in form.text("first_name")

    def test_explicit_value_beats_model(self, form):
        form.model({"username": "amara"})

        assert 'value="other"' in form.text("username", "other")

    def test_old_input_beats_everything(self, form, old_input):
        old_input["username"] = "typed"
        form.model({"username": "amara"})

        assert 'value="typed"' in form.text("username", "other")

    def test_password_ignores_model(self, form):
        form.model({"password": "hunter2"})

        assert "hunter2" not in form.password("password")

    def test_labelled_field_gets_id(self, form):
        form.label("email")

        assert 'id="email"' in form.email("email")

    def test_unlabelled_field_has_no_id(self, form):
        assert "id=" not in form.text("username")


class TestElements:
    def test_label_formats_name(self, form):
        assert form.label("first_name") == '<label for="first_name">First Name</label>'

    def test_label_escapes_value(self, form):
        assert "&lt;b&gt;" in form.label("x", "<b>")

    def test_textarea_size(self, form):
        html = form.textarea("about_me", "hi", {"size": "40x3"})

        assert 'cols="40"' in html
        assert 'rows="3"' in html
        assert "size=" not in html

    def test_textarea_from_model(self, form):
        form.model({"about_me": "I lend."})

        assert ">I lend.</textarea>" in form.textarea("about_me")

    def test_submit(self, form):
        assert form.submit("Go") == '<input type="submit" value="Go">'

    def test_hidden(self, form):
        assert form.hidden("step", "2") == '<input name="step" type="hidden" value="2">'
