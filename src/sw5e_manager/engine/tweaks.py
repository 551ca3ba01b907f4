"""Manual overrides ("tweaks") applied to computed casting fields.

Every numeric field of a casting summary is passed through a tweak hook
keyed by a dotted path such as ``techCasting.maxPoints``. The default hook
reads the character's ``tweaks`` mapping; callers may inject another.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from sw5e_manager.models.character import RawCharacter, Tweak


class TweakHook(Protocol):
    """Pure function mapping a computed value to its final value."""

    def __call__(self, character: RawCharacter, path: str, value: int) -> int: ...


def get_tweak(tweaks: Mapping[str, Any], path: str) -> Tweak | None:
    """Find the tweak stored at a dotted path.

    Args:
        tweaks: Nested tweak mapping from the character record.
        path: Dotted field path (e.g., 'forceCasting.lightSaveDC').

    Returns:
        The tweak, or None when nothing is stored at the path.
    """
    node: Any = tweaks
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    if isinstance(node, Tweak):
        return node
    if isinstance(node, Mapping):
        return Tweak.model_validate(node)
    return None


def apply_tweak(character: RawCharacter, path: str, value: int) -> int:
    """Apply the character's tweak for a field to a computed value.

    Example:
        >>> hero = RawCharacter(tweaks={"techCasting": {"maxPoints": {"override": 20}}})
        >>> apply_tweak(hero, "techCasting.maxPoints", 7)
        20
    """
    tweak = get_tweak(character.tweaks, path)
    if tweak is None:
        return value
    if tweak.override is not None:
        return tweak.override
    return value + (tweak.bonus or 0)


def ignore_tweaks(character: RawCharacter, path: str, value: int) -> int:
    """Tweak hook that always returns the computed value."""
    return value


__all__ = [
    "TweakHook",
    "get_tweak",
    "apply_tweak",
    "ignore_tweaks",
]
