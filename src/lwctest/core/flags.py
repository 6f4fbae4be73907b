"""Static description of the flags the ``run`` command understands itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

Token: TypeAlias = str

PASSTHROUGH_MARKER: Token = "--"


def looks_like_flag(token: Token) -> bool:
    """Return ``True`` when *token* starts with a hyphen."""
    return token.startswith("-")


def flag_name(token: Token) -> str:
    """Return *token* with every leading hyphen removed."""
    return token.lstrip("-")


@dataclass(frozen=True)
class FlagDefinition:
    """A boolean flag declared by the adapter.

    ``name`` is spelled exactly as the external runner expects it, because
    matching tokens are forwarded verbatim.
    """

    name: str
    char: str | None = None
    exclusive: frozenset[str] = field(default_factory=frozenset)
    summary: str = ""

    def matches(self, name: str) -> bool:
        """Return ``True`` when *name* is this flag's long name or its alias."""
        return name == self.name or (self.char is not None and name == self.char)

    @property
    def usage(self) -> str:
        """Return the ``-c, --name`` form shown in help output."""
        if self.char:
            return f"-{self.char}, --{self.name}"
        return f"--{self.name}"


class FlagRegistry:
    """Immutable lookup table over a fixed set of :class:`FlagDefinition` entries."""

    def __init__(self, definitions: Iterable[FlagDefinition]) -> None:
        self._definitions = tuple(definitions)
        names = [definition.name for definition in self._definitions]
        if len(set(names)) != len(names):
            message = "Flag names must be unique"
            raise ValueError(message)
        for definition in self._definitions:
            unknown = definition.exclusive.difference(names)
            if unknown:
                message = (
                    f"Flag '{definition.name}' is exclusive with undeclared "
                    f"flags: {', '.join(sorted(unknown))}"
                )
                raise ValueError(message)

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, name: str) -> FlagDefinition | None:
        """Return the definition whose long name is *name*."""
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None

    def lookup(self, token: Token) -> FlagDefinition | None:
        """Return the definition matching a hyphenated *token*, if any."""
        if not looks_like_flag(token):
            return None
        name = flag_name(token)
        for definition in self._definitions:
            if definition.matches(name):
                return definition
        return None

    def is_own(self, token: Token) -> bool:
        """Return ``True`` when *token* names one of the registered flags."""
        return self.lookup(token) is not None

    def exclusive_pairs(self) -> list[tuple[FlagDefinition, FlagDefinition]]:
        """Return every mutually exclusive pair once, in declaration order."""
        pairs: list[tuple[FlagDefinition, FlagDefinition]] = []
        seen: set[frozenset[str]] = set()
        for definition in self._definitions:
            for other in self._definitions:
                key = frozenset((definition.name, other.name))
                if key in seen or definition is other:
                    continue
                if other.name in definition.exclusive or definition.name in other.exclusive:
                    seen.add(key)
                    pairs.append((definition, other))
        return pairs


FLAG_REGISTRY = FlagRegistry(
    (
        FlagDefinition(
            "debug",
            char="d",
            exclusive=frozenset({"watch"}),
            summary="Run tests in debug mode.",
        ),
        FlagDefinition(
            "watch",
            exclusive=frozenset({"debug"}),
            summary="Run tests in watch mode.",
        ),
        FlagDefinition("coverage", summary="Compute coverage for test runs."),
        FlagDefinition(
            "updateSnapshot",
            char="u",
            summary="Re-record every snapshot that fails during a test run.",
        ),
        FlagDefinition("verbose", summary="Display individual test results with the test suite hierarchy."),
        FlagDefinition(
            "skipApiVersionCheck",
            summary="Disable the sourceApiVersion check against the installed LWC version.",
        ),
    ),
)


__all__ = [
    "FLAG_REGISTRY",
    "PASSTHROUGH_MARKER",
    "FlagDefinition",
    "FlagRegistry",
    "Token",
    "flag_name",
    "looks_like_flag",
]
