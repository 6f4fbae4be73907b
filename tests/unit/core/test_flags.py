"""Tests for lwctest.core.flags."""

from __future__ import annotations

import dataclasses

import pytest

from lwctest.core.flags import FLAG_REGISTRY, FlagDefinition, FlagRegistry, flag_name, looks_like_flag


def test_token_helpers() -> None:
    """Tokens are flags when hyphenated; names drop every leading hyphen."""
    assert looks_like_flag("-u")
    assert looks_like_flag("--")
    assert not looks_like_flag("my.test.js")
    assert flag_name("---watch") == "watch"
    assert flag_name("--") == ""


def test_registry_contents() -> None:
    """The registry declares the six runner flags the adapter owns."""
    names = [definition.name for definition in FLAG_REGISTRY]

    assert names == ["debug", "watch", "coverage", "updateSnapshot", "verbose", "skipApiVersionCheck"]
    assert FLAG_REGISTRY.get("debug") == FlagDefinition(
        "debug", char="d", exclusive=frozenset({"watch"}), summary="Run tests in debug mode.",
    )


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("--debug", "debug"),
        ("-d", "debug"),
        ("-u", "updateSnapshot"),
        ("--updateSnapshot", "updateSnapshot"),
        ("-watch", "watch"),
        ("--skipApiVersionCheck", "skipApiVersionCheck"),
    ],
)
def test_lookup_by_name_or_alias(token: str, expected: str) -> None:
    """Lookup strips hyphens and matches long names or aliases."""
    definition = FLAG_REGISTRY.lookup(token)

    assert definition is not None
    assert definition.name == expected


@pytest.mark.parametrize("token", ["debug", "--ci", "--", "-", "--update-snapshot", "--debug=true"])
def test_lookup_misses(token: str) -> None:
    """Bare values, foreign flags, and decorated spellings are not own flags."""
    assert FLAG_REGISTRY.lookup(token) is None
    assert not FLAG_REGISTRY.is_own(token)


def test_exclusive_pairs_reported_once() -> None:
    """Symmetric exclusivity yields a single pair."""
    pairs = [(first.name, second.name) for first, second in FLAG_REGISTRY.exclusive_pairs()]

    assert pairs == [("debug", "watch")]


def test_exclusive_declared_on_one_side_only() -> None:
    """Declaring exclusivity on either definition is enough."""
    registry = FlagRegistry(
        [FlagDefinition("a", exclusive=frozenset({"b"})), FlagDefinition("b"), FlagDefinition("c")],
    )

    pairs = [(first.name, second.name) for first, second in registry.exclusive_pairs()]

    assert pairs == [("a", "b")]


def test_registry_rejects_duplicates_and_unknown_exclusions() -> None:
    """Malformed registries are refused at construction time."""
    with pytest.raises(ValueError, match="unique"):
        FlagRegistry([FlagDefinition("a"), FlagDefinition("a")])
    with pytest.raises(ValueError, match="undeclared"):
        FlagRegistry([FlagDefinition("a", exclusive=frozenset({"z"}))])


def test_definitions_are_immutable() -> None:
    """Flag definitions cannot be mutated after startup."""
    definition = FLAG_REGISTRY.get("watch")
    assert definition is not None

    with pytest.raises(dataclasses.FrozenInstanceError):
        definition.name = "other"  # type: ignore[misc]


def test_usage_strings() -> None:
    """Help output shows the alias when one exists."""
    debug = FLAG_REGISTRY.get("debug")
    coverage = FLAG_REGISTRY.get("coverage")
    assert debug is not None
    assert coverage is not None

    assert debug.usage == "-d, --debug"
    assert coverage.usage == "--coverage"
