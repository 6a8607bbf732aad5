"""
=============================================================================
BUILDER CONFIGURATION
=============================================================================

Centralized defaults for the in-memory request and response objects.

=============================================================================
WHY A CONFIG CLASS?
=============================================================================

A built request reports facts that a real container would learn from the
socket: scheme, host, port, context path. Here they are fixed values, and
this dataclass is the one place they live. The defaults reproduce a plain
request to http://localhost/ with an empty context path.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Explicit BuilderConfig passed to a builder                     │
    │      └── new_request_builder(res, config=BuilderConfig(...))       │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── BuilderConfig.from_env()                                   │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import codecs
import logging
import os
from dataclasses import dataclass


@dataclass
class BuilderConfig:
    """
    Settings shared by request and response builders.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    REQUEST ORIGIN
    - scheme, server_name, server_port, context_path, servlet_path

    CONTENT
    - locale, default_charset, buffer_size

    SESSION
    - session_max_inactive_interval

    LOGGING
    - log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # REQUEST ORIGIN
    # ─────────────────────────────────────────────────────────────────────

    scheme: str = "http"
    """
    Request scheme. "https" makes the request report itself as secure.
    """

    server_name: str = "localhost"
    """
    Host name used when the request URL is reconstructed.
    """

    server_port: int = 80
    """
    Port used when the request URL is reconstructed.
    Omitted from the URL when it is the scheme's default (80 / 443).
    """

    context_path: str = ""
    """
    Context path prefix of the request URI. Empty or starting with "/".
    """

    servlet_path: str = ""
    """
    Servlet path between context path and path info. Empty or starting with "/".
    """

    # ─────────────────────────────────────────────────────────────────────
    # CONTENT
    # ─────────────────────────────────────────────────────────────────────

    locale: str = "en_US"
    """
    Locale reported by requests and the initial locale of responses.
    """

    default_charset: str = "utf-8"
    """
    Charset used by the response writer when no encoding was set.
    """

    buffer_size: int = 8192
    """
    Initial response buffer size (8 KB). Only reported, never enforced.
    """

    # ─────────────────────────────────────────────────────────────────────
    # SESSION
    # ─────────────────────────────────────────────────────────────────────

    session_max_inactive_interval: int = 1800
    """
    Initial max inactive interval of a session stub, in seconds.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"
    """
    Level of the "requestbuilder" logger (DEBUG shows every build).
    """

    @classmethod
    def from_env(cls) -> "BuilderConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        REQUESTBUILDER_SCHEME        Request scheme (default: http)
        REQUESTBUILDER_SERVER_NAME   Host name (default: localhost)
        REQUESTBUILDER_SERVER_PORT   Port (default: 80)
        REQUESTBUILDER_CONTEXT_PATH  Context path (default: "")
        REQUESTBUILDER_SERVLET_PATH  Servlet path (default: "")
        REQUESTBUILDER_LOCALE        Locale (default: en_US)
        REQUESTBUILDER_LOG_LEVEL     Logging level (default: WARNING)

        =====================================================================
        """
        return cls(
            scheme=os.getenv("REQUESTBUILDER_SCHEME", "http"),
            server_name=os.getenv("REQUESTBUILDER_SERVER_NAME", "localhost"),
            server_port=int(os.getenv("REQUESTBUILDER_SERVER_PORT", "80")),
            context_path=os.getenv("REQUESTBUILDER_CONTEXT_PATH", ""),
            servlet_path=os.getenv("REQUESTBUILDER_SERVLET_PATH", ""),
            locale=os.getenv("REQUESTBUILDER_LOCALE", "en_US"),
            log_level=os.getenv("REQUESTBUILDER_LOG_LEVEL", "WARNING"),
        )

    def validate(self) -> None:
        """Fail fast on values no real request could carry."""
        if self.scheme not in ("http", "https"):
            raise ValueError(f"Invalid scheme: {self.scheme}. Must be http or https.")

        if not 0 < self.server_port < 65536:
            raise ValueError(f"Invalid port: {self.server_port}. Must be 1-65535.")

        for name in ("context_path", "servlet_path"):
            path = getattr(self, name)
            if path and not path.startswith("/"):
                raise ValueError(f"{name} must be empty or start with '/'")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        try:
            codecs.lookup(self.default_charset)
        except LookupError:
            raise ValueError(f"Unknown charset: {self.default_charset}") from None


def setup_logging(config: BuilderConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("requestbuilder").setLevel(level)
