"""
=============================================================================
REQUEST PROGRESS TRACKER
=============================================================================

Records timestamped messages while a request is processed.

=============================================================================
MESSAGE FORMAT
=============================================================================

Each entry is rendered as its offset from tracker creation in microseconds,
right-aligned to 7 characters, then the message:

          0 TIMER_START{Request Processing}
          3 COMMENT timer_end format is {<elapsed microseconds>,<timer name>} <optional message>
         41 LOG Resolved /content/page
        108 TIMER_START{render}
        953 TIMER_END{845,render} rendered html
       1002 TIMER_END{1002,Request Processing} Request Processing

Newlines inside a message are replaced with '_' so one entry is always one
line. Entries are mirrored to the module logger at DEBUG.

=============================================================================
"""

import logging
import time
from typing import Dict, Iterator, List, NamedTuple, Optional


logger = logging.getLogger(__name__)


REQUEST_PROCESSING_TIMER = "Request Processing"
LOG_PREFIX = "LOG "
COMMENT_PREFIX = "COMMENT "
TIMER_END_FORMAT = "{<elapsed microseconds>,<timer name>} <optional message>"
PADDING_WIDTH = 7

# Request attribute under which an enclosing request shares its tracker.
PROGRESS_TRACKER_ATTRIBUTE = f"{__name__}.RequestProgressTracker"


class _TrackingEntry(NamedTuple):
    timestamp: int      # time.perf_counter_ns()
    message: str


class RequestProgressTracker:
    """
    Timer and message log for one request.

    Example:
        tracker = RequestProgressTracker()
        tracker.start_timer("render")
        tracker.log("Rendering {} with {}", "/content/page", "html")
        tracker.log_timer("render", "done")
        tracker.done()
        print("".join(tracker.get_messages()))
    """

    def __init__(self):
        self._entries: List[_TrackingEntry] = []
        self._named_timers: Dict[str, int] = {}
        self._processing_start = self._start_timer(REQUEST_PROCESSING_TIMER)
        self._processing_end: Optional[int] = None
        self._add(COMMENT_PREFIX + "timer_end format is " + TIMER_END_FORMAT)

    def _add(self, message: str, timestamp: Optional[int] = None) -> None:
        if timestamp is None:
            timestamp = time.perf_counter_ns()
        self._entries.append(_TrackingEntry(timestamp, message))
        logger.debug(message)

    def _start_timer(self, name: str) -> int:
        timer = time.perf_counter_ns()
        self._named_timers[name] = timer
        self._add(f"TIMER_START{{{name}}}", timer)
        return timer

    # =========================================================================
    # RECORDING
    # =========================================================================

    def log(self, message: str, *args) -> None:
        """Record a message; ``args`` are applied with str.format()."""
        if args:
            message = message.format(*args)
        self._add(LOG_PREFIX + message)

    def start_timer(self, name: str) -> None:
        """Start (or restart) the named timer."""
        self._start_timer(name)

    def log_timer(self, name: str, message: Optional[str] = None, *args) -> None:
        """
        Record the time elapsed since ``start_timer(name)``.

        Unknown timer names are ignored.
        """
        start = self._named_timers.get(name)
        if start is None:
            return
        if message is not None and args:
            message = message.format(*args)

        elapsed_us = (time.perf_counter_ns() - start) // 1000
        entry = f"TIMER_END{{{elapsed_us},{name}}}"
        if message is not None:
            entry += " " + message
        self._add(entry)

    def done(self) -> None:
        """Stop the request processing timer. Later calls do nothing."""
        if self._processing_end is not None:
            return
        self.log_timer(REQUEST_PROCESSING_TIMER, REQUEST_PROCESSING_TIMER)
        self._processing_end = time.perf_counter_ns()

    # =========================================================================
    # READING
    # =========================================================================

    @property
    def duration(self) -> int:
        """Nanoseconds from creation to done(), or to now if still running."""
        end = self._processing_end
        if end is None:
            end = time.perf_counter_ns()
        return end - self._processing_start

    def get_messages(self) -> Iterator[str]:
        """Formatted entries, one line each, newline-terminated."""
        for entry in list(self._entries):
            offset_us = (entry.timestamp - self._processing_start) // 1000
            message = entry.message.replace("\n", "_").replace("\r", "_")
            yield f"{offset_us:>{PADDING_WIDTH}} {message}\n"

    def dump(self, writer) -> None:
        """Write every formatted entry to ``writer`` (anything with write())."""
        self.log_timer(REQUEST_PROCESSING_TIMER, "Dumping SlingRequestProgressTracker Entries")
        for line in self.get_messages():
            writer.write(line)
