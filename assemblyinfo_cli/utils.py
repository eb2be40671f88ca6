"""
Generic utility functions and classes used across the program.
"""
from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from typing import Any


class SafeDict(dict):
    """Extends dict to ignore missing keys when using format_map operations"""
    def __missing__(self, key: Any) -> str:
        return "{" + str(key) + "}"


def to_collection[T](data: T | Iterable[T] | None, cls: type[tuple | list | set] = tuple) -> tuple[T, ...] | None:
    """
    Safely turn any object into a collection of the given ``cls`` type.
    Strings and mappings are treated as a single item. None is returned as is.
    """
    if data is None or isinstance(data, cls):
        return data
    if isinstance(data, str | bytes | Mapping) or not isinstance(data, Iterable):
        return cls([data])
    return cls(data)


def unique[T: Hashable](values: Iterable[T]) -> tuple[T, ...]:
    """Remove duplicates from the given ``values`` keeping the order in which each value was first seen"""
    return tuple(dict.fromkeys(values))


def merge_maps[T: MutableMapping](source: T, new: Mapping, extend: bool = True, overwrite: bool = False) -> T:
    """
    Recursively merge two maps, merging ``new`` into ``source``.

    :param source: The map to merge into. This map is modified in place.
    :param new: The map to merge from.
    :param extend: When a value in both maps is a list, extend the source list with the new one.
    :param overwrite: When a key is present in both maps and the values cannot be merged,
        replace the source value with the new value.
    :return: The modified ``source`` map.
    """
    for key, value in new.items():
        if key not in source:
            source[key] = value
        elif isinstance(source[key], MutableMapping) and isinstance(value, Mapping):
            merge_maps(source[key], value, extend=extend, overwrite=overwrite)
        elif extend and isinstance(source[key], list) and isinstance(value, Iterable) and not isinstance(value, str):
            source[key].extend(value)
        elif overwrite:
            source[key] = value

    return source
