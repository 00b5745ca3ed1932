from __future__ import annotations

import xfeature
from xfeature import DisabledMarker, FlagRegistry, define_flag


def _forest() -> dict:
    return {
        "One": define_flag("one", {"One": define_flag("one")}),
        "Two": define_flag("two", {"One": define_flag("one")}),
        "Note": "ignored",
    }


def test_register_flattens_forest(monkeypatch) -> None:
    monkeypatch.delenv("FEATURES", raising=False)
    registry = FlagRegistry()
    forest = _forest()
    out = registry.register(forest)

    assert out is forest
    assert registry.names() == ["one", "one.one", "two", "two.one"]
    assert len(registry) == 4
    assert "two.one" in registry
    assert registry.lookup("two.one") is forest["Two"].One
    assert [n.name() for n in registry.roots()] == ["one", "two"]


def test_register_appends_and_replaces_same_name() -> None:
    registry = FlagRegistry()
    first = define_flag("billing")
    second = define_flag("billing", {"Refunds": define_flag("refunds")})
    registry.register({"A": define_flag("auth"), "B": first}, load_from_source=False)
    registry.register({"B": second}, load_from_source=False)

    assert registry.names() == ["auth", "billing", "billing.refunds"]
    assert registry.lookup("billing") is second


def test_override_clears_entries_and_state() -> None:
    registry = FlagRegistry()
    forest = _forest()
    registry.register(forest, load_from_source=False)
    forest["Two"].disable()
    registry.register({"X": define_flag("x")}, override=True, load_from_source=False)

    assert registry.names() == ["x"]
    assert forest["Two"].explicit_state is None


def test_override_round_trip_leaks_no_state() -> None:
    registry = FlagRegistry()
    forest = _forest()
    registry.register(forest, load_from_source=False)
    registry.load_from_string("-one,-two.one")
    registry.register(forest, override=True, load_from_source=False)

    fresh = FlagRegistry()
    fresh.register(_forest(), load_from_source=False)
    assert registry.snapshot() == fresh.snapshot()
    assert all(node.explicit_state is None for node in registry)


def test_get_with_negation_returns_marker() -> None:
    registry = FlagRegistry()
    forest = registry.register(_forest(), load_from_source=False)

    assert registry.get("two.one") is forest["Two"].One
    assert registry.get("-two.one") == DisabledMarker("two.one")
    assert registry.get("missing") is None
    assert registry.get("-missing") is None


def test_register_loads_default_source(monkeypatch) -> None:
    monkeypatch.setenv("FEATURES", "-one,-two")
    registry = FlagRegistry()
    forest = registry.register(_forest())
    assert forest["One"].is_enabled() is False
    assert forest["Two"].One.is_enabled() is False


def test_register_loads_named_source(monkeypatch) -> None:
    monkeypatch.setenv("FEATURES", "-one")
    monkeypatch.setenv("APP_FEATURES", "-two")
    registry = FlagRegistry()
    forest = registry.register(_forest(), load_from_source="APP_FEATURES")
    assert forest["One"].is_enabled() is True
    assert forest["Two"].is_enabled() is False


def test_register_without_source_skips_loading(monkeypatch) -> None:
    monkeypatch.setenv("FEATURES", "-one,not-a-flag")
    registry = FlagRegistry()
    forest = registry.register(_forest(), load_from_source=False)
    assert forest["One"].is_enabled() is True


def test_registries_are_independent() -> None:
    a = FlagRegistry()
    b = FlagRegistry()
    fa = a.register(_forest(), load_from_source=False)
    fb = b.register(_forest(), load_from_source=False)
    fa["One"].disable()

    assert fa["One"].One.is_enabled() is False
    assert fb["One"].One.is_enabled() is True


def test_module_level_api_uses_default_registry(monkeypatch) -> None:
    monkeypatch.setenv("FEATURES", "-two")
    try:
        flags = xfeature.register_flags(_forest(), override=True)
        assert xfeature.is_enabled(flags["Two"].One) is False
        assert xfeature.get_flag("one") is flags["One"]
        assert xfeature.get_flag("-one") == DisabledMarker("one")

        xfeature.load_from_string("two.one")
        assert flags["Two"].One.is_enabled() is True

        xfeature.load_features([flags["One"].as_disabled()], override=True)
        assert flags["Two"].One.explicit_state is None
        assert flags["One"].is_enabled() is False
    finally:
        xfeature.default_registry.clear()


def test_clear_leaves_nodes_held_by_another_registry() -> None:
    a = FlagRegistry()
    b = FlagRegistry()
    forest = {"Two": define_flag("two", {"One": define_flag("one")})}
    a.register(forest, load_from_source=False)
    b.register(forest, load_from_source=False)
    b.load_from_string("-two")

    a.clear()

    assert len(a) == 0
    assert b.names() == ["two", "two.one"]
    assert forest["Two"].explicit_state is False
    assert forest["Two"].One.is_enabled() is False

    a.reset_states()
    assert forest["Two"].explicit_state is False

    b.clear()
    assert forest["Two"].explicit_state is None
    assert forest["Two"].One.is_enabled() is True
