"""``assert_conforms_to_schema`` fixture for tests of device payloads.

Installing device-schema-tree registers this module under the ``pytest11``
entry point, so any test session can request the fixture without touching
its conftest.py.  The fixture checks a payload against a SchemaTree with
``check_document`` and fails the test with every violation listed.
"""

from __future__ import annotations

from typing import Any

import pytest

from device_schema.tree.conformance import check_document
from device_schema.tree.schema_tree import SchemaTree


@pytest.fixture(scope="session")
def assert_conforms_to_schema() -> Any:
    """Fixture that returns a callable schema conformance asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to ``check_document``, which only reads the tree).

    Usage in tests::

        def test_payload(assert_conforms_to_schema, tree):
            assert_conforms_to_schema({"value": {"v": 21.0}}, tree)

        def test_wrong_kind(assert_conforms_to_schema, tree):
            with pytest.raises(AssertionError, match=r"is not of type 'number'"):
                assert_conforms_to_schema({"v": "warm"}, tree)

    Returns:
        A callable ``_assert(document, tree) -> None`` that raises
        ``AssertionError`` when the document does not have the tree's shape.
    """

    def _assert(document: Any, tree: SchemaTree) -> None:
        """Assert that ``document`` has the shape described by ``tree``.

        Args:
            document: A payload, either bare or wrapped as ``{"value": ...}``.
            tree:     The schema the payload must conform to.

        Raises:
            AssertionError: Listing every violation found, one per line.
        """
        problems = check_document(tree, document)
        if problems:
            details = "\n".join(f"  {problem}" for problem in problems)
            raise AssertionError(
                f"Document does not conform to schema {tree.root.name!r}:\n"
                f"{details}\n"
                f"  document: {document}"
            )

    return _assert
