"""Small helpers for operators running inside a cluster."""

from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from operatorkit import labels as _labels

NAMESPACE_FILE = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")


def get_operator_namespace(path: Union[str, Path] = NAMESPACE_FILE) -> str:
    """Return the namespace the operator runs in, read from the service account file."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError as err:
        raise FileNotFoundError("cannot find namespace of the operator") from err
    return text.strip()


def _format_duration(seconds: float) -> str:
    if seconds <= 0:
        return "0s"
    if seconds < 1e-6:
        return f"{round(seconds * 1e9)}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.9g}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.9g}ms"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    text = f"{secs:.9g}s"
    if hours:
        return f"{hours}h{minutes}m{text}"
    if minutes:
        return f"{minutes}m{text}"
    return text


@contextmanager
def time_elapsed(function_name: str) -> Iterator[None]:
    """Print how long the enclosed block (or decorated function) took."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        print(f"{function_name} took {_format_duration(elapsed)}")


def get_label_selector(key: str, value: str) -> _labels.Selector:
    """Return a selector for ``key=value``, or an empty selector if the key is empty."""
    return _labels.get_label_selector(key, value)