"""Global pytest configuration.

The sample graphs (triangle1, diamond1, k4, two_components, square1) live in
the `tests.algorithms.sample_graphs` plugin so every test package can request
them by name. The plugin is registered here rather than imported so pytest
rewrites its assertions.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
