"""Web front end: a form that returns the spellchecked text."""

from __future__ import annotations

import argparse
import json
import logging
import mimetypes
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from urllib.parse import parse_qsl
from wsgiref.simple_server import make_server

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from autocorrect.spellcheck_parser import SpellcheckParser
from autocorrect.spellchecker import DictionaryError

logger = logging.getLogger(__name__)

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8080
TEXT_INPUT_NAME = "textInput"
MAX_TEXT_LENGTH = 150
DEFAULT_DICTIONARY = "dictionary.txt"

Response = tuple[str, list[tuple[str, str]], bytes]

_NOT_FOUND: Response = ("404 Not Found", [("Content-Type", "text/plain")], b"Not Found")


def extract_text(body: str) -> str:
    """Return the trimmed form value of the text input, cut to the maximum length."""
    value = next(
        (val for key, val in parse_qsl(body, keep_blank_values=True) if key == TEXT_INPUT_NAME),
        "",
    )
    return value[:MAX_TEXT_LENGTH].strip()


def error_response(message: str) -> Response:
    """Build the JSON error response sent when the spellchecker cannot start."""
    error_message = f"Failed to initialize SpellcheckParser: {message}"
    logger.error("%s", error_message)
    body = json.dumps({"error": error_message}, separators=(",", ":")).encode("utf-8")
    return (
        "500 Internal Server Error",
        [("Content-Type", "application/json")],
        body,
    )


def _read_body(environ: dict) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    return environ["wsgi.input"].read(length) if length > 0 else b""


def _serve_static(static_root: Path, relative: str) -> Response:
    target = (static_root / relative.lstrip("/")).resolve()
    if not target.is_relative_to(static_root) or not target.is_file():
        return _NOT_FOUND
    content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
    return "200 OK", [("Content-Type", content_type)], target.read_bytes()


def _handle_index(env: Environment, dictionary_file: str | os.PathLike[str], raw: bytes) -> Response:
    try:
        body = raw.decode("utf-8")
    except UnicodeDecodeError:
        return (
            "422 Unprocessable Entity",
            [("Content-Type", "text/plain")],
            b"Request body is not valid UTF-8",
        )
    try:
        parser = SpellcheckParser(dictionary_file)
    except DictionaryError as exc:
        return error_response(str(exc))

    context = {}
    if body:
        text = extract_text(body)
        logger.debug("Received body: %s", text)
        context["spellchecked_sentences"] = [item.to_dict() for item in parser.spellcheck_all(text)]

    try:
        rendered = env.get_template("index.html").render(context)
    except TemplateError as exc:
        logger.error("Failed to render template: %r", exc)
        return (
            "500 Internal Server Error",
            [("Content-Type", "text/plain")],
            b"Internal Server Error",
        )
    return "200 OK", [("Content-Type", "text/html")], rendered.encode("utf-8")


def create_app(
    template_dir: str | os.PathLike[str] = "templates",
    static_dir: str | os.PathLike[str] = "static",
    dictionary_file: str | os.PathLike[str] = DEFAULT_DICTIONARY,
) -> Callable[[dict, Callable], Iterable[bytes]]:
    """Create the WSGI application serving the form and the static files."""
    env = Environment(
        loader=FileSystemLoader(os.fspath(template_dir)),
        autoescape=select_autoescape(enabled_extensions=("html",)),
    )
    static_root = Path(static_dir).resolve()

    def app(environ: dict, start_response: Callable) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"
        method = environ.get("REQUEST_METHOD", "GET").upper()
        if path == "/static" or path.startswith("/static/"):
            response = _serve_static(static_root, path[len("/static"):])
        elif path == "/":
            if method in ("GET", "POST"):
                response = _handle_index(env, dictionary_file, _read_body(environ))
            else:
                response = (
                    "405 Method Not Allowed",
                    [("Content-Type", "text/plain"), ("Allow", "GET, POST")],
                    b"Method Not Allowed",
                )
        else:
            response = _NOT_FOUND
        status, headers, body = response
        start_response(status, headers + [("Content-Length", str(len(body)))])
        return [body]

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the spellchecking web server."""
    parser = argparse.ArgumentParser(description="Serve the spellchecking form.")
    parser.add_argument("--host", default=LISTEN_HOST)
    parser.add_argument("--port", type=int, default=LISTEN_PORT)
    parser.add_argument("--templates", default="templates")
    parser.add_argument("--static", default="static")
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(message)s")
    app = create_app(args.templates, args.static, args.dictionary)
    with make_server(args.host, args.port, app) as httpd:
        logger.info("Server listening on %s:%d...", args.host, args.port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0