import io
import json
from urllib.parse import urlencode
from wsgiref.util import setup_testing_defaults

import pytest

from autocorrect.server import MAX_TEXT_LENGTH, create_app, error_response, extract_text

TEMPLATE = (
    "{% if spellchecked_sentences %}"
    "{% for s in spellchecked_sentences %}{{ s.original }}={{ s.spellchecked }};{% endfor %}"
    "{% else %}empty{% endif %}"
)


@pytest.fixture
def site(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "index.html").write_text(TEMPLATE, encoding="utf-8")
    static = tmp_path / "static"
    static.mkdir()
    (static / "style.css").write_text("body {}", encoding="utf-8")
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("hello\nworld\nspelling\n", encoding="utf-8")
    return tmp_path


def _app(site, dictionary_name="dictionary.txt"):
    return create_app(site / "templates", site / "static", site / dictionary_name)


def _call(app, method="GET", path="/", body=b""):
    environ = {}
    setup_testing_defaults(environ)
    environ.update(
        {
            "REQUEST_METHOD": method,
            "PATH_INFO": path,
            "CONTENT_LENGTH": str(len(body)),
            "wsgi.input": io.BytesIO(body),
        }
    )
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    chunks = app(environ, start_response)
    return captured["status"], captured["headers"], b"".join(chunks)


def test_extract_text_finds_field():
    assert extract_text("other=x&textInput=hello+wrld") == "hello wrld"


def test_extract_text_missing_field():
    assert extract_text("other=x") == ""


def test_extract_text_truncates_and_trims():
    result = extract_text(urlencode({"textInput": "  " + "a" * 300}))
    assert len(result) == MAX_TEXT_LENGTH - 2
    assert result == result.strip()


def test_error_response_json():
    status, headers, body = error_response("boom")
    assert status.startswith("500")
    assert headers == [("Content-Type", "application/json")]
    assert json.loads(body) == {"error": "Failed to initialize SpellcheckParser: boom"}


def test_get_renders_empty_form(site):
    status, headers, body = _call(_app(site))
    assert status.startswith("200")
    assert headers["Content-Type"] == "text/html"
    assert body == b"empty"


def test_post_spellchecks_text(site):
    form = urlencode({"textInput": "Hello wrld!"}).encode()
    status, _, body = _call(_app(site), method="POST", body=form)
    assert status.startswith("200")
    assert body.decode() == "Hello=Hello;wrld!=world!;"


def test_post_output_is_escaped(site):
    form = urlencode({"textInput": "<hello>"}).encode()
    _, _, body = _call(_app(site), method="POST", body=form)
    assert b"<hello>" not in body
    assert b"&lt;hello&gt;" in body


def test_missing_dictionary_gives_json_error(site):
    status, headers, body = _call(_app(site, "missing.txt"))
    assert status.startswith("500")
    assert headers["Content-Type"] == "application/json"
    assert "Dictionary file" in json.loads(body)["error"]


def test_static_file_served(site):
    status, _, body = _call(_app(site), path="/static/style.css")
    assert status.startswith("200")
    assert body == b"body {}"


def test_static_traversal_rejected(site):
    status, _, _ = _call(_app(site), path="/static/../dictionary.txt")
    assert status.startswith("404")


def test_unknown_path_not_found(site):
    status, _, _ = _call(_app(site), path="/nowhere")
    assert status.startswith("404")


def test_other_method_rejected(site):
    status, headers, _ = _call(_app(site), method="DELETE")
    assert status.startswith("405")
    assert "POST" in headers["Allow"]