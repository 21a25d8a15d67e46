"""Pytest fixtures for LogTree tests."""
import hashlib

import pytest


def h(data: bytes) -> bytes:
    """Reference SHA-256, independent of logtree.core.digest."""
    return hashlib.sha256(data).digest()


@pytest.fixture
def abc_lines():
    """Provide the three-line log used for the worked example."""
    return ["a", "b", "c"]


@pytest.fixture
def abc_root():
    """Provide the root of ["a", "b", "c"] computed by hand."""
    p1 = h(h(b"a") + h(b"b"))
    p2 = h(h(b"c") + h(b"c"))
    return h(p1 + p2)


@pytest.fixture
def sample_lines():
    """Provide 7 realistic log lines."""
    return [
        f"2024-01-{i + 1:02d}T00:00:00Z service=api level=info msg=request_{i}"
        for i in range(7)
    ]


@pytest.fixture
def log_file(tmp_path, sample_lines):
    """Provide a log file containing sample_lines."""
    path = tmp_path / "app.log"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def empty_log_file(tmp_path):
    """Provide an empty log file."""
    path = tmp_path / "empty.log"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def trace_events():
    """Provide a trace callback that records (receipt_type, data) pairs."""
    events = []

    def trace(receipt_type, data):
        events.append((receipt_type, data))

    trace.events = events
    return trace
