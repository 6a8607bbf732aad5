"""
Unit tests for the in-memory response.
"""

import pytest

from requestbuilder import (
    BuilderConfig,
    BuilderLockedError,
    Cookie,
    HTTPStatus,
    LegacyResponseResult,
    ResponseBuilder,
    ResponseCommittedError,
    ResponseResult,
    UnsupportedOperationError,
)


class TestResponseBuilder:
    """Tests for ResponseBuilder."""

    def test_build_types(self):
        """Test which class each build method returns."""
        assert type(ResponseBuilder().build()) is ResponseResult
        assert isinstance(ResponseBuilder().build_legacy(), LegacyResponseResult)

    def test_build_twice_fails(self):
        """Test that a builder builds one response."""
        builder = ResponseBuilder()
        builder.build()

        with pytest.raises(BuilderLockedError):
            builder.build()
        with pytest.raises(BuilderLockedError):
            builder.build_legacy()

    def test_fresh_response(self, response):
        """Test the state of a freshly built response."""
        assert response.status == 200
        assert response.content_length == -1
        assert not response.is_committed
        assert response.status_message is None
        assert response.get_header_names() == []
        assert response.get_cookies() is None
        assert response.locale == "en_US"
        assert response.buffer_size == 8192

    def test_config_defaults(self):
        """Test that config seeds locale and buffer size."""
        response = ResponseBuilder(BuilderConfig(locale="de_DE", buffer_size=1024)).build()

        assert response.locale == "de_DE"
        assert response.buffer_size == 1024

    @pytest.mark.parametrize("config", [
        BuilderConfig(buffer_size=0),
        BuilderConfig(default_charset="no-such-charset"),
    ])
    def test_invalid_config_rejected(self, config):
        """Test that the builder validates its configuration."""
        with pytest.raises(ValueError):
            ResponseBuilder(config)


class TestStatus:
    """Tests for status transitions and commit."""

    def test_set_status(self, response):
        """Test plain status change does not commit."""
        response.set_status(HTTPStatus.CREATED)

        assert response.status == 201
        assert not response.is_committed

    def test_send_error(self, response):
        """Test that send_error sets status and commits."""
        response.send_error(500)

        assert response.status == 500
        assert response.status_message is None
        assert response.is_committed

    def test_send_error_with_message(self, response):
        """Test that send_error records the message."""
        response.send_error(404, "Nothing here")

        assert response.status == 404
        assert response.status_message == "Nothing here"

    def test_send_redirect(self, response):
        """Test redirect status, location and commit."""
        response.send_redirect("/new/location")

        assert response.status == 302
        assert response.get_header("Location") == "/new/location"
        assert response.status_message is None
        assert response.is_committed

    def test_flush_buffer_commits(self, response):
        """Test that flush_buffer commits."""
        response.flush_buffer()
        assert response.is_committed

    def test_legacy_status_message(self, legacy_response):
        """Test the legacy two-argument set_status."""
        legacy_response.set_status(503, "Down for maintenance")

        assert legacy_response.status == 503
        assert legacy_response.status_message == "Down for maintenance"

    def test_legacy_status_message_cleared_by_none(self, legacy_response):
        """Test that an explicit None message clears the previous one."""
        legacy_response.send_error(500, "boom")
        legacy_response.set_status(200, None)

        assert legacy_response.status == 200
        assert legacy_response.status_message is None

    def test_legacy_status_without_message_keeps_it(self, legacy_response):
        """Test that the one-argument form leaves the message alone."""
        legacy_response.set_status(503, "Down for maintenance")
        legacy_response.set_status(500)

        assert legacy_response.status_message == "Down for maintenance"

    def test_current_set_status_has_no_message(self, response):
        """Test that the current generation takes only a status."""
        with pytest.raises(TypeError):
            response.set_status(503, "Down for maintenance")


class TestReset:
    """Tests for reset() and reset_buffer()."""

    def test_reset_clears_state(self, response):
        """Test that reset restores build-time defaults."""
        response.set_status(404)
        response.set_header("X-Key", "v")
        response.add_cookie(Cookie("c", "v"))
        response.set_content_length(10)
        response.get_writer().write("text")

        response.reset()

        assert response.status == 200
        assert response.get_header_names() == []
        assert response.get_cookies() is None
        assert response.content_length == -1
        assert response.get_output() == b""

    def test_reset_after_commit_fails(self, response):
        """Test that a committed response cannot be reset."""
        response.send_error(500)

        with pytest.raises(ResponseCommittedError) as exc_info:
            response.reset()

        assert str(exc_info.value) == "Response already committed."

    def test_reset_buffer_after_commit_fails(self, response):
        """Test that a committed response keeps its buffer."""
        response.flush_buffer()

        with pytest.raises(ResponseCommittedError):
            response.reset_buffer()

    def test_reset_buffer_keeps_status(self, response):
        """Test that reset_buffer leaves status and headers alone."""
        response.set_status(201)
        response.set_header("X-Key", "v")
        response.get_output_stream().write(b"abc")

        response.reset_buffer()

        assert response.status == 201
        assert response.get_header("X-Key") == "v"
        assert response.get_output() == b""

    def test_reset_buffer_drops_accessors(self, response):
        """Test that new accessors are created after reset_buffer."""
        stream = response.get_output_stream()
        writer = response.get_writer()

        response.reset_buffer()

        assert response.get_output_stream() is not stream
        assert response.get_writer() is not writer


class TestHeadersAndCookies:
    """Tests for response headers and cookies."""

    def test_headers(self, response):
        """Test header operations on the response."""
        response.add_header("Accept", "a")
        response.add_header("Accept", "b")
        response.set_int_header("Content-Length", 42)
        response.add_date_header("Date", 50000)

        assert response.contains_header("Accept")
        assert not response.contains_header("missing")
        assert response.get_headers("Accept") == ["a", "b"]
        assert response.get_header("Content-Length") == "42"
        assert response.get_header("Date") == "Thu, 1 Jan 1970 00:00:50 GMT"
        assert response.get_header_names() == ["Accept", "Content-Length", "Date"]

    def test_set_replaces_headers(self, response):
        """Test set_* replaces earlier values."""
        response.add_int_header("n", 1)
        response.set_int_header("n", 2)
        response.add_date_header("d", 1000)
        response.set_date_header("d", 2000)
        response.add_header("k", "a")
        response.set_header("k", "b")

        assert response.get_headers("n") == ["2"]
        assert response.get_headers("d") == ["Thu, 1 Jan 1970 00:00:02 GMT"]
        assert response.get_headers("k") == ["b"]

    def test_cookies(self, response):
        """Test adding and reading cookies."""
        response.add_cookie(Cookie("a", "1"))
        response.add_cookie(Cookie("b", "2"))
        response.add_cookie(Cookie("a", "3"))

        assert response.get_cookie("a").value == "3"
        assert [c.name for c in response.get_cookies()] == ["a", "b"]
        assert response.get_cookie("missing") is None


class TestContentMetadata:
    """Tests for content type, encoding, length and locale."""

    def test_content_type(self, response):
        """Test content type with and without charset."""
        assert response.content_type is None

        response.content_type = "text/text"
        assert response.content_type == "text/text"

        response.character_encoding = "UTF-8"
        assert response.content_type == "text/text;charset=UTF-8"

    def test_content_type_none(self, response):
        """Test that content type can be cleared."""
        response.content_type = "text/text"
        response.content_type = None

        assert response.content_type is None

    def test_content_type_with_charset(self, response):
        """Test that the charset is split off."""
        response.content_type = "text/text;charset=UTF-16"

        assert response.content_type == "text/text;charset=UTF-16"
        assert response.character_encoding == "UTF-16"

    def test_content_type_frozen_after_writer(self, response):
        """Test that content type is ignored once the writer exists."""
        response.content_type = "text/text;charset=UTF-8"
        response.get_writer()
        response.content_type = "application/json;charset=UTF-16"

        assert response.content_type == "text/text;charset=UTF-8"

    def test_content_length(self, response):
        """Test setting content length."""
        response.set_content_length(42)
        assert response.content_length == 42

    def test_locale_and_buffer_size(self, response):
        """Test settable locale and buffer size."""
        response.locale = "fr_FR"
        response.buffer_size = 1024

        assert response.locale == "fr_FR"
        assert response.buffer_size == 1024

    def test_default_charset(self, response):
        """Test that the charset falls back to UTF-8."""
        assert response.charset == "utf-8"


class TestOutput:
    """Tests for output accessors and retrieval."""

    def test_accessors_are_cached(self, response):
        """Test that the same stream and writer are returned."""
        assert response.get_output_stream() is response.get_output_stream()
        assert response.get_writer() is response.get_writer()

    def test_writer_output(self, response):
        """Test text written through the writer."""
        writer = response.get_writer()
        writer.write("hello ")
        writer.print("world")

        assert response.get_output_as_string() == "hello world\n"
        assert response.is_committed

    def test_stream_output(self, response):
        """Test bytes written through the stream."""
        response.get_output_stream().write(b"\x00\x01\x02")

        assert response.get_output() == b"\x00\x01\x02"
        assert response.is_committed

    def test_writer_uses_charset(self, response):
        """Test that the writer encodes with the response charset."""
        response.character_encoding = "UTF-16"
        response.get_writer().write("hé")

        output = response.get_output()

        assert output == "hé".encode("utf-16")
        assert response.get_output_as_string() == "hé"

    def test_mixed_output_shares_buffer(self, response):
        """Test that stream and writer write to the same buffer."""
        response.get_output_stream().write(b"abc")
        writer = response.get_writer()
        writer.write("def")
        writer.flush()

        assert response.get_output() == b"abcdef"

    def test_empty_output(self, response):
        """Test output when nothing was written."""
        assert response.get_output() == b""
        assert response.get_output_as_string() == ""

    def test_stream_is_ready(self, response):
        """Test that the output stream never blocks."""
        assert response.get_output_stream().is_ready()


class TestUnsupported:
    """Tests for URL encoding stubs."""

    def test_encode_url(self, response):
        """Test that URL encoding is not supported."""
        with pytest.raises(UnsupportedOperationError):
            response.encode_url("/x")
        with pytest.raises(UnsupportedOperationError):
            response.encode_redirect_url("/x")

    def test_legacy_encode_url(self, legacy_response):
        """Test the legacy generation as well."""
        with pytest.raises(UnsupportedOperationError):
            legacy_response.encode_url("/x")
