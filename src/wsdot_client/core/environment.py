"""Runtime environment classification (test / web / server)."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple

TEST_MARKER_ENV = "WSDOT_ENV"
WORKER_ID_ENV = "PYTEST_XDIST_WORKER"
TEST_USER_AGENT_MARKERS = ("jsdom", "happy-dom")


class EnvironmentType(str, Enum):
    TEST = "test"
    WEB = "web"
    SERVER = "server"


@dataclass(frozen=True)
class EnvironmentProbe:
    """
    Snapshot of the ambient signals used for classification.

    Tests build probes directly instead of mutating os.environ or faking
    browser globals; library code calls EnvironmentProbe.current().
    """

    env: Mapping[str, str] = field(default_factory=dict)
    has_window: bool = False
    has_document: bool = False
    user_agent: Optional[str] = None

    @classmethod
    def current(cls) -> "EnvironmentProbe":
        has_window, has_document, user_agent = _browser_globals()
        return cls(
            env=dict(os.environ),
            has_window=has_window,
            has_document=has_document,
            user_agent=user_agent,
        )


def _browser_globals() -> Tuple[bool, bool, Optional[str]]:
    # Browser globals only exist under a WebAssembly runtime such as Pyodide.
    if sys.platform != "emscripten":
        return False, False, None
    try:
        import js  # type: ignore[import-not-found]
    except ImportError:
        return False, False, None

    window = getattr(js, "window", None)
    document = getattr(js, "document", None)
    navigator = getattr(window, "navigator", None) if window is not None else None
    user_agent = getattr(navigator, "userAgent", None) if navigator is not None else None
    return window is not None, document is not None, user_agent


def is_test_environment(probe: EnvironmentProbe) -> bool:
    if probe.env.get(TEST_MARKER_ENV) == "test":
        return True
    if WORKER_ID_ENV in probe.env:
        return True
    if probe.has_window and probe.user_agent:
        return any(marker in probe.user_agent for marker in TEST_USER_AGENT_MARKERS)
    return False


def is_web_environment(probe: EnvironmentProbe) -> bool:
    return probe.has_window and probe.has_document


def get_environment_type(probe: Optional[EnvironmentProbe] = None) -> EnvironmentType:
    """Classify the runtime; test signals win over browser globals."""
    probe = probe or EnvironmentProbe.current()
    if is_test_environment(probe):
        return EnvironmentType.TEST
    if is_web_environment(probe):
        return EnvironmentType.WEB
    return EnvironmentType.SERVER


__all__ = [
    "TEST_MARKER_ENV",
    "WORKER_ID_ENV",
    "EnvironmentType",
    "EnvironmentProbe",
    "is_test_environment",
    "is_web_environment",
    "get_environment_type",
]
