"""Compile invocation prefixes into a single command-matching rule."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Tuple

LOGGER = logging.getLogger(__name__)

COMMAND_TOKEN = r"([\w-]+)"
ARGUMENTS = r"\s?(.*)"


@dataclass(frozen=True)
class CommandMatch:
    command_name: str
    args: str
    prefix: str


def normalize_prefixes(prefixes: Iterable[str]) -> Tuple[str, ...]:
    """Drop empty and duplicate prefixes, keeping the configured order."""
    seen = []
    for prefix in prefixes:
        if not isinstance(prefix, str) or not prefix:
            LOGGER.warning("Ignoring unusable prefix %r", prefix)
            continue
        if prefix not in seen:
            seen.append(prefix)
    return tuple(seen)


def compile_prefixes(prefixes: Iterable[str]) -> Optional[Pattern[str]]:
    """Build the matching rule for ``prefixes``.

    Longer prefixes are tried first so that overlapping prefixes (``!`` and
    ``!!``) prefer the most specific one; equal lengths keep their configured
    order. Returns ``None`` for an empty set, which matches nothing.
    """

    ordered = normalize_prefixes(prefixes)
    if not ordered:
        return None
    ranked = sorted(enumerate(ordered), key=lambda item: (-len(item[1]), item[0]))
    alternation = "|".join(f"({re.escape(prefix)})" for _, prefix in ranked)
    return re.compile(f"^(?:{alternation}){COMMAND_TOKEN}{ARGUMENTS}", re.IGNORECASE | re.DOTALL)


class PrefixMatcher:
    """Holds the compiled rule for the current prefix set."""

    def __init__(self, prefixes: Iterable[str]) -> None:
        self._prefixes: Tuple[str, ...] = ()
        self._rule: Optional[Pattern[str]] = None
        self.recompile(prefixes)

    @property
    def prefixes(self) -> Tuple[str, ...]:
        return self._prefixes

    @property
    def is_inert(self) -> bool:
        return self._rule is None

    def recompile(self, prefixes: Iterable[str]) -> None:
        self._prefixes = normalize_prefixes(prefixes)
        self._rule = compile_prefixes(self._prefixes)
        LOGGER.debug("Compiled command rule for prefixes %s", self._prefixes)

    def match(self, text: str) -> Optional[CommandMatch]:
        if self._rule is None:
            return None
        found = self._rule.match(text)
        if not found:
            return None
        groups = found.groups()
        prefix = next(group for group in groups[:-2] if group is not None)
        return CommandMatch(command_name=groups[-2], args=groups[-1], prefix=prefix)
