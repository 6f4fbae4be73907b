"""Routing of a mixed command line onto an ``sfdx-lwc-jest`` invocation.

The ``run`` command accepts its own flags alongside any flag or positional
meant for the external runner. Because the runner's flag set is open-ended,
tokens are never parsed strictly: a permissive pass drops the tokens the CLI
layer already consumed, the registry then decides which of the remaining
tokens are ours, and the final argument list hoists those in front of
everything else.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lwctest.core.errors import MutuallyExclusiveFlagsError
from lwctest.core.flags import FLAG_REGISTRY, PASSTHROUGH_MARKER, looks_like_flag

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from lwctest.core.flags import FlagRegistry, Token

JSON_FLAG = "--json"
LOGLEVEL_FLAG = "--loglevel"

logger = logging.getLogger(__name__)


def classify_argv(tokens: Iterable[Token]) -> list[Token]:
    """Return *tokens* without the meta tokens handled by the CLI layer.

    Removes every passthrough marker (``--``), ``--json`` and the
    ``--loglevel`` option together with its value. Nothing else is rejected
    or altered.
    """
    classified: list[Token] = []
    skip_value = False
    for token in tokens:
        if skip_value:
            skip_value = False
            continue
        if token in (PASSTHROUGH_MARKER, JSON_FLAG):
            continue
        if token == LOGLEVEL_FLAG:
            skip_value = True
            continue
        if token.startswith(LOGLEVEL_FLAG + "="):
            continue
        classified.append(token)
    return classified


def present_flags(tokens: Iterable[Token], registry: FlagRegistry = FLAG_REGISTRY) -> set[str]:
    """Return the names of the registered flags that occur in *tokens*."""
    names: set[str] = set()
    for token in tokens:
        definition = registry.lookup(token)
        if definition is not None:
            names.add(definition.name)
    return names


def validate_exclusive(tokens: Sequence[Token], registry: FlagRegistry = FLAG_REGISTRY) -> None:
    """Raise :class:`MutuallyExclusiveFlagsError` when exclusive flags are combined."""
    present = present_flags(tokens, registry)
    for first, second in registry.exclusive_pairs():
        if first.name in present and second.name in present:
            logger.debug(
                "Rejected exclusive flags",
                extra={"flags": [first.name, second.name]},
            )
            raise MutuallyExclusiveFlagsError(first.name, second.name)


def rearrange_args(tokens: Iterable[Token], registry: FlagRegistry = FLAG_REGISTRY) -> list[Token]:
    """Return the runner invocation for *tokens*.

    The result starts with the ``--`` separator, followed by the registered
    flags in reverse encounter order (each match is prepended) and then every
    other token in encounter order.
    """
    own: list[Token] = []
    other: list[Token] = []
    for token in tokens:
        if looks_like_flag(token) and registry.is_own(token):
            own.insert(0, token)
        else:
            other.append(token)
    return [PASSTHROUGH_MARKER, *own, *other]


def build_invocation(raw_tokens: Iterable[Token], registry: FlagRegistry = FLAG_REGISTRY) -> list[Token]:
    """Classify, validate and rearrange *raw_tokens* in one step."""
    classified = classify_argv(raw_tokens)
    validate_exclusive(classified, registry)
    invocation = rearrange_args(classified, registry)
    logger.debug("Built runner invocation", extra={"invocation": invocation})
    return invocation


__all__ = [
    "build_invocation",
    "classify_argv",
    "present_flags",
    "rearrange_args",
    "validate_exclusive",
]
