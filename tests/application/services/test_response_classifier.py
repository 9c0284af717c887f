# tests/application/services/test_response_classifier.py
import json

import pytest

from application.services.response_classifier import ResponseClassifier
from domain.render import NO_COOKIES_ROW, BodyRenderMode, NameValueRow, StatusClass
from domain.response import ResponseDescriptor


@pytest.fixture
def classifier() -> ResponseClassifier:
    return ResponseClassifier()


class TestStatus:
    @pytest.mark.parametrize(
        "code, text",
        [
            (200, "OK"),
            (201, "Created"),
            (204, "No Content"),
            (400, "Bad Request"),
            (401, "Unauthorized"),
            (403, "Forbidden"),
            (404, "Not Found"),
            (500, "Internal Server Error"),
            (502, "Bad Gateway"),
            (503, "Service Unavailable"),
        ],
    )
    def test_known_status_text(self, classifier, code, text):
        assert classifier.status_text(code) == text

    def test_unknown_status_text(self, classifier):
        assert classifier.status_text(999) == "Unknown"
        assert classifier.status_text(302) == "Unknown"

    @pytest.mark.parametrize(
        "code, expected",
        [
            (200, StatusClass.SUCCESS),
            (299, StatusClass.SUCCESS),
            (301, StatusClass.REDIRECT),
            (404, StatusClass.ERROR),
            (503, StatusClass.ERROR),
            (101, StatusClass.UNCLASSIFIED),
            (999, StatusClass.UNCLASSIFIED),
            (0, StatusClass.UNCLASSIFIED),
        ],
    )
    def test_status_class(self, classifier, code, expected):
        assert classifier.status_class(code) is expected


class TestRenderBody:
    def test_json_object_is_pretty_printed(self, classifier):
        rendered = classifier.render_body('{"a":1}')

        assert rendered.mode is BodyRenderMode.JSON
        assert rendered.text == '{\n  "a": 1\n}'

    def test_json_round_trip(self, classifier):
        body = '{"list": [1, 2.5, "x", null, true], "nested": {"k": "v"}, "u": "日本"}'

        rendered = classifier.render_body(body)

        assert json.loads(rendered.text) == json.loads(body)

    def test_json_scalars_count_as_json(self, classifier):
        assert classifier.render_body("42").mode is BodyRenderMode.JSON
        assert classifier.render_body(" null ").mode is BodyRenderMode.JSON

    def test_nan_is_not_json(self, classifier):
        rendered = classifier.render_body("NaN")
        assert rendered.mode is BodyRenderMode.TEXT
        assert rendered.text == "NaN"

    def test_html_is_escaped(self, classifier):
        body = "  <html><script>alert('x')</script><p>a & b</p></html>"

        rendered = classifier.render_body(body)

        assert rendered.mode is BodyRenderMode.HTML_ESCAPED
        assert "<script>" not in rendered.text
        assert "<" not in rendered.text
        assert ">" not in rendered.text
        assert "&lt;script&gt;" in rendered.text
        assert "a &amp; b" in rendered.text

    def test_malformed_markup_is_still_escaped(self, classifier):
        rendered = classifier.render_body("<not closed")
        assert rendered.mode is BodyRenderMode.HTML_ESCAPED
        assert rendered.text == "&lt;not closed"

    def test_plain_text_is_unmodified(self, classifier):
        rendered = classifier.render_body("hello <b>world</b>")

        assert rendered.mode is BodyRenderMode.TEXT
        assert rendered.text == "hello <b>world</b>"

    @pytest.mark.parametrize("body", [123, {"a": 1}, ["x"]])
    def test_non_string_input_does_not_raise(self, classifier, body):
        rendered = classifier.render_body(body)
        assert isinstance(rendered.text, str)

    def test_empty_body_is_text(self, classifier):
        rendered = classifier.render_body("")

        assert rendered.mode is BodyRenderMode.TEXT
        assert rendered.text == ""

    def test_choice_is_deterministic(self, classifier):
        body = "<p>same</p>"
        assert classifier.render_body(body) == classifier.render_body(body)


class TestHeaderAndCookieRows:
    def test_header_rows_keep_order(self, classifier):
        headers = {"B": "2", "A": "1", "Set-Cookie": "a=1"}

        rows = classifier.header_rows(headers)

        assert [row.name for row in rows] == ["B", "A", "Set-Cookie"]

    def test_cookie_rows_match_case_insensitively(self, classifier):
        headers = {"Set-Cookie": "a=1", "Content-Type": "text/plain"}

        assert classifier.cookie_rows(headers) == [NameValueRow(name="Set-Cookie", value="a=1")]

    def test_cookie_rows_lowercase_header(self, classifier):
        assert classifier.cookie_rows({"set-cookie": "sid=x"}) == [
            NameValueRow(name="set-cookie", value="sid=x")
        ]

    def test_no_cookies_yields_placeholder(self, classifier):
        assert classifier.cookie_rows({"Content-Type": "text/plain"}) == [NO_COOKIES_ROW]
        assert classifier.cookie_rows({}) == [NO_COOKIES_ROW]


class TestClassify:
    def test_classify_json_response(self, classifier):
        response = ResponseDescriptor(
            status_code=200,
            duration_ms=120,
            size_bytes=7,
            headers={"Content-Type": "application/json"},
            body='{"a":1}',
        )

        state = classifier.classify(response)

        assert state.status_code == 200
        assert state.status_text == "OK"
        assert state.status_class is StatusClass.SUCCESS
        assert state.status_color == "#4CAF50"
        assert state.duration_ms == 120
        assert state.size_bytes == 7
        assert state.body_render_mode is BodyRenderMode.JSON
        assert state.header_rows == [NameValueRow("Content-Type", "application/json")]
        assert state.cookie_rows == [NO_COOKIES_ROW]
        assert state.html_title is None

    def test_classify_html_response_extracts_title(self, classifier):
        response = ResponseDescriptor(
            status_code=404,
            duration_ms=5,
            size_bytes=60,
            headers={"set-cookie": "sid=1"},
            body="<html><head><title> Not here </title></head></html>",
        )

        state = classifier.classify(response)

        assert state.status_class is StatusClass.ERROR
        assert state.body_render_mode is BodyRenderMode.HTML_ESCAPED
        assert state.html_title == "Not here"
        assert state.cookie_rows == [NameValueRow("set-cookie", "sid=1")]
