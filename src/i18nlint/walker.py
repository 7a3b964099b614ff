from typing import Iterator

from i18nlint.classes import Mapping, Scalar


def join_key(parent_key: str, key: str) -> str:
    return f"{parent_key}.{key}" if parent_key else key


def each_translation(
    mapping: Mapping, parent_key: str = ""
) -> Iterator[tuple[str, str, str]]:
    """Yield ``(full_key, value, last_key_part)`` for every leaf, depth first."""
    for key, value in mapping.entries.items():
        current_key = join_key(parent_key, key)
        if isinstance(value, Mapping):
            yield from each_translation(value, current_key)
        elif isinstance(value, Scalar):
            yield current_key, value.text, key


def each_pluralization(
    mapping: Mapping, parent_key: str = ""
) -> Iterator[tuple[str, Mapping]]:
    """Yield ``(key_prefix, mapping)`` for every mapping holding a plural key.

    Only the mapping's own keys are inspected; every child mapping is still
    walked so nested pluralizations are found too.
    """
    if mapping.has_pluralization_key():
        yield parent_key, mapping

    for key, value in mapping.entries.items():
        if isinstance(value, Mapping):
            yield from each_pluralization(value, join_key(parent_key, key))
