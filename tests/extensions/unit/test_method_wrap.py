"""Method wrapping tests."""

from __future__ import annotations

from typing import Any

from schematik import EXTENSIONS, Schematik, wrap
from schematik.extensions import MethodTable


class _Receiver:
    def __init__(self) -> None:
        self.clones = 0

    def clone(self) -> str:
        self.clones += 1
        return "clone"


def test_wrapped_method_returns_result_of_fn() -> None:
    table = MethodTable("instance")

    method = wrap(table, "echo", lambda receiver, value: value)

    assert table.get("echo") is method
    assert method(_Receiver(), "value") == "value"


def test_wrapped_method_clones_receiver_when_fn_returns_none() -> None:
    table = MethodTable("instance")
    receiver = _Receiver()
    seen: list[Any] = []

    method = wrap(table, "inspect", lambda target, *args, **kwargs: seen.append((args, kwargs)))

    assert method(receiver, 1, key="k") == "clone"
    assert receiver.clones == 1
    assert seen == [((1,), {"key": "k"})]


def test_wrapped_method_keeps_fn_metadata() -> None:
    def mark_internal(receiver: Schematik) -> Schematik:
        """Mark the schema as internal."""
        return receiver.schema({"x-internal": True})

    method = wrap(MethodTable("instance"), "mark_internal", mark_internal)

    assert method.__name__ == "mark_internal"
    assert method.__doc__ == "Mark the schema as internal."


def test_wrapped_methods_chain_on_builders() -> None:
    wrap(
        EXTENSIONS.instance_surface,
        "wrap_test_deprecated",
        lambda receiver: receiver.schema({"deprecated": True}),
    )
    wrap(EXTENSIONS.instance_surface, "wrap_test_noop", lambda receiver: None)
    original = Schematik.string()

    chained = original.wrap_test_noop().wrap_test_deprecated()

    assert chained.done() == {"type": "string", "deprecated": True}
    assert original.done() == {"type": "string"}
    assert original.wrap_test_noop() is not original
