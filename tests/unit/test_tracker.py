"""
Unit tests for the request progress tracker.
"""

import io
import re

from requestbuilder.request.tracker import RequestProgressTracker


LINE = re.compile(r"^ *\d+ .*\n$")


class TestRequestProgressTracker:
    """Tests for RequestProgressTracker."""

    def test_initial_messages(self):
        """Test the timer start and format comment."""
        messages = list(RequestProgressTracker().get_messages())

        assert len(messages) == 2
        assert messages[0].endswith(" TIMER_START{Request Processing}\n")
        assert messages[1].endswith(
            " COMMENT timer_end format is {<elapsed microseconds>,<timer name>} <optional message>\n"
        )

    def test_message_format(self):
        """Test offset padding and line termination."""
        tracker = RequestProgressTracker()
        tracker.log("hello")

        for message in tracker.get_messages():
            assert LINE.match(message)
            assert message[:7].strip().isdigit()
            assert message[7] == " "
        assert list(tracker.get_messages())[0].startswith("      0 ")

    def test_log_with_arguments(self):
        """Test message formatting with arguments."""
        tracker = RequestProgressTracker()
        tracker.log("Resolved {} as {}", "/content/page", "page")

        assert list(tracker.get_messages())[-1].endswith(" LOG Resolved /content/page as page\n")

    def test_newlines_replaced(self):
        """Test that one entry stays on one line."""
        tracker = RequestProgressTracker()
        tracker.log("a\nb\rc")

        assert list(tracker.get_messages())[-1].endswith(" LOG a_b_c\n")

    def test_timers(self):
        """Test named timer start and end entries."""
        tracker = RequestProgressTracker()
        tracker.start_timer("render")
        tracker.log_timer("render", "rendered {}", "html")
        tracker.log_timer("render")

        messages = list(tracker.get_messages())

        assert messages[2].endswith(" TIMER_START{render}\n")
        assert re.search(r" TIMER_END\{\d+,render\} rendered html\n$", messages[3])
        assert re.search(r" TIMER_END\{\d+,render\}\n$", messages[4])

    def test_unknown_timer_ignored(self):
        """Test that ending an unknown timer records nothing."""
        tracker = RequestProgressTracker()
        tracker.log_timer("never-started")

        assert len(list(tracker.get_messages())) == 2

    def test_done_is_idempotent(self):
        """Test that done() records the end once and freezes duration."""
        tracker = RequestProgressTracker()
        tracker.done()
        duration = tracker.duration
        tracker.done()

        messages = list(tracker.get_messages())

        assert len(messages) == 3
        assert re.search(r"TIMER_END\{\d+,Request Processing\} Request Processing\n$", messages[2])
        assert tracker.duration == duration

    def test_duration_grows_while_running(self):
        """Test that duration is measured until now before done()."""
        tracker = RequestProgressTracker()
        first = tracker.duration

        assert tracker.duration >= first >= 0

    def test_dump(self):
        """Test dumping to a writer."""
        tracker = RequestProgressTracker()
        tracker.log("hello")
        out = io.StringIO()

        tracker.dump(out)

        lines = out.getvalue().splitlines()
        assert len(lines) == 4
        assert lines[2].endswith(" LOG hello")
        assert "Dumping SlingRequestProgressTracker Entries" in lines[3]
