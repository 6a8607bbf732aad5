"""
Unit tests for the session and servlet context stubs.
"""

import time

import pytest

from requestbuilder.errors import IllegalStateError, SessionInvalidatedError, UnsupportedOperationError
from requestbuilder.request.context import ServletContext
from requestbuilder.request.session import HttpSession


@pytest.fixture
def session() -> HttpSession:
    return HttpSession(ServletContext())


class TestHttpSession:
    """Tests for HttpSession."""

    def test_defaults(self, session):
        """Test a freshly created session."""
        assert session.is_new
        assert not session.is_invalidated
        assert session.max_inactive_interval == 1800
        assert session.get_attribute_names() == []
        assert isinstance(session.servlet_context, ServletContext)

    def test_ids_are_unique(self):
        """Test that each session gets its own id."""
        assert HttpSession(None).id != HttpSession(None).id

    def test_creation_time(self):
        """Test that creation time is epoch milliseconds."""
        before = int(time.time() * 1000)
        session = HttpSession(None)
        after = int(time.time() * 1000)

        assert before <= session.creation_time <= after
        assert session.last_accessed_time == session.creation_time

    def test_attributes(self, session):
        """Test setting, reading and removing attributes."""
        session.set_attribute("a", 1)
        session.set_attribute("b", 2)

        assert session.get_attribute("a") == 1
        assert session.get_attribute_names() == ["a", "b"]

        session.remove_attribute("a")
        assert session.get_attribute("a") is None
        assert session.get_attribute_names() == ["b"]

    def test_legacy_value_aliases(self, session):
        """Test that the legacy value methods act on attributes."""
        session.put_value("a", 1)

        assert session.get_attribute("a") == 1
        assert session.get_value("a") == 1
        assert session.get_value_names() == ["a"]

        session.remove_value("a")
        assert session.get_value("a") is None

    def test_max_inactive_interval(self, session):
        """Test that the interval is settable."""
        session.max_inactive_interval = 60
        assert session.max_inactive_interval == 60

    def test_invalidated_session_rejects_access(self, session):
        """Test that reads and writes fail after invalidate()."""
        session.invalidate()

        assert session.is_invalidated
        with pytest.raises(SessionInvalidatedError):
            session.get_attribute("a")
        with pytest.raises(SessionInvalidatedError):
            session.get_attribute_names()
        with pytest.raises(SessionInvalidatedError):
            session.set_attribute("a", 1)
        with pytest.raises(SessionInvalidatedError):
            session.remove_attribute("a")
        with pytest.raises(SessionInvalidatedError):
            session.creation_time
        with pytest.raises(SessionInvalidatedError):
            session.last_accessed_time
        with pytest.raises(SessionInvalidatedError):
            session.is_new

    def test_invalidate_twice_fails(self, session):
        """Test that invalidate() is a one-shot operation."""
        session.invalidate()

        with pytest.raises(IllegalStateError) as exc_info:
            session.invalidate()

        assert str(exc_info.value) == "Session is already invalidated."

    def test_unchecked_properties_after_invalidate(self, session):
        """Test that id, context and interval stay readable."""
        session.invalidate()

        assert session.id
        assert session.servlet_context is not None
        assert session.max_inactive_interval == 1800


class TestServletContext:
    """Tests for the ServletContext stub."""

    def test_mime_type(self):
        """Test that every file is opaque binary."""
        context = ServletContext()

        assert context.get_mime_type("index.html") == "application/octet-stream"
        assert context.get_mime_type("photo.png") == "application/octet-stream"

    @pytest.mark.parametrize("call", [
        lambda c: c.get_attribute("a"),
        lambda c: c.get_attribute_names(),
        lambda c: c.set_attribute("a", 1),
        lambda c: c.remove_attribute("a"),
        lambda c: c.get_context("/other"),
        lambda c: c.get_context_path(),
        lambda c: c.get_init_parameter("p"),
        lambda c: c.get_major_version(),
        lambda c: c.get_request_dispatcher("/x"),
        lambda c: c.get_named_dispatcher("x"),
        lambda c: c.get_real_path("/x"),
        lambda c: c.get_resource("/x"),
        lambda c: c.get_server_info(),
        lambda c: c.log("message"),
        lambda c: c.add_servlet("s", object()),
        lambda c: c.add_filter("f", object()),
        lambda c: c.add_listener(object()),
        lambda c: c.get_session_cookie_config(),
        lambda c: c.get_session_timeout(),
        lambda c: c.set_response_character_encoding("utf-8"),
    ])
    def test_everything_else_unsupported(self, call):
        """Test that container operations fail fast."""
        with pytest.raises(UnsupportedOperationError):
            call(ServletContext())

    def test_unsupported_is_not_implemented_error(self):
        """Test that the error can be caught as NotImplementedError."""
        with pytest.raises(NotImplementedError):
            ServletContext().get_server_info()
