import pytest

from vin.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
)
from vin.keymaps.defaults import DEFAULT_BINDINGS, load_default_keymaps


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_sequence(*keys: str) -> KeySequence:
    return KeySequence.from_strings(*keys)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    sequence: KeySequence | None = None,
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=sequence or make_sequence("g", "g"),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.gg")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.gg.duplicate"))


def test_same_sequence_in_different_modes_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.gg"))
    registry.register_binding(make_binding(binding_id="insert.gg", mode="insert"))

    assert registry.stats().binding_count == 2
    assert registry.stats().modes == ("insert", "normal")


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_revision_increments_on_registration() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    before = registry.revision()

    registry.register_binding(make_binding(binding_id="normal.gg"))

    assert registry.revision() == before + 1


def test_keystroke_parse_normalizes_modifiers() -> None:
    stroke = KeyStroke.parse("CTRL+h")

    assert stroke.key == "h"
    assert stroke.modifiers == ("ctrl",)
    assert stroke.token == "ctrl+h"
    assert KeyStroke.parse("+").token == "+"


def test_load_default_keymaps_registers_every_binding() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
    assert registry.stats().modes == ("command", "insert", "normal")


def test_load_default_keymaps_timeout_override() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, default_sequence_timeout_ms=1500)

    binding = registry.get_binding("normal.gg")
    assert binding.sequence.timeout_ms == 1500


def test_load_default_keymaps_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

    load_default_keymaps(registry, replace=True)
    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
