"""pytest plugin for json-data-io.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from json_data_io import DataAccessor, DataStore, NodeKind, StorageConfig
from json_data_io.path import PathLike
from json_data_io.resolver import Handle


@pytest.fixture(scope="session")
def assert_data_value() -> Any:
    """Fixture that returns a callable typed-value asserter.

    The getter used depends on the type of ``expected``: ``bool`` uses the
    boolean getter, ``int``/``float`` the numeric getter and ``str`` the string
    getter.  A missing path or a node of the wrong kind fails the assertion.

    Usage in tests::

        def test_port(assert_data_value):
            doc = load_string_data('{"net": {"port": 8080}}')
            assert_data_value(doc, "net.port", 8080)

    Returns:
        A callable ``_assert(data, path, expected) -> None`` that raises
        ``AssertionError`` when the value at ``path`` differs from ``expected``.
    """
    accessor = DataAccessor()

    def _assert(data: Handle, path: PathLike, expected: bool | float | str) -> None:
        node = accessor.resolver.resolve(data, path)
        found = "nothing" if node is None else f"a {node.kind} node"

        actual: bool | float | str | None
        if isinstance(expected, bool):
            kind = NodeKind.BOOLEAN
            actual = accessor.get_boolean_value(data, False, path)
        elif isinstance(expected, (int, float)):
            kind = NodeKind.NUMBER
            actual = accessor.get_numeric_value(data, 0.0, path)
        elif isinstance(expected, str):
            kind = NodeKind.STRING
            actual = accessor.get_string_value(data, None, path)
        else:
            raise TypeError(f"Unsupported expected value type: {type(expected)!r}")

        ok = node is not None and node.kind is kind and actual == expected
        if not ok:
            raise AssertionError(
                f"data value mismatch at {str(path)!r}:\n"
                f"  expected: {expected!r}\n"
                f"  found:    {found}"
                + ("" if node is None else f" with text {node.text!r}")
            )

    return _assert


@pytest.fixture
def data_store(tmp_path: Path) -> DataStore:
    """A DataStore whose base directory is the test's ``tmp_path``."""
    return DataStore(StorageConfig(base_directory=str(tmp_path)))
