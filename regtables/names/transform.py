"""
Renaming of coefficient and response names.

Two kinds of rules, both supplied by the caller:
    - exact: {'x1': 'Capital'} replaces a whole name
    - substitution: {'log(': 'ln('} replaces substrings

An exact match wins outright; substitutions are only applied when the
name has no exact match, and then all of them are applied in order.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from regtables.names.coefnames import AbstractCoefName


def transformer(name: Any, repl_dict: Mapping[str, str]) -> Any:
    """
    Apply every (old, new) substring replacement in order.

    Structured names are transformed part by part and keep their variant.
    None passes through.
    """
    if name is None:
        return None
    if isinstance(name, AbstractCoefName):
        return name.map_strings(lambda s: transformer(s, repl_dict))
    for old, new in repl_dict.items():
        name = name.replace(old, new)
    return name


def _is_pair(name: Any) -> bool:
    return (
        isinstance(name, tuple)
        and len(name) == 2
        and isinstance(name[1], str)
        and (name[0] is None or isinstance(name[0], (str, AbstractCoefName)))
    )


def _exact_lookup(name: Any, exact_dict: Mapping[Any, str]) -> Any:
    if isinstance(name, Hashable) and name in exact_dict:
        return exact_dict[name]
    key = str(name)
    if key in exact_dict:
        return exact_dict[key]
    return None


def replace_name(
    name: Any,
    exact_dict: Mapping[Any, str] | None = None,
    repl_dict: Mapping[str, str] | None = None,
) -> Any:
    """
    Rename a coefficient or response name.

    Args:
        name: A string, a structured coefficient name, a (name, group)
            pair, or None
        exact_dict: Whole-name replacements, keyed by the name itself or
            by its string form
        repl_dict: Substring replacements applied in iteration order

    Returns:
        The renamed name. For a (name, group) pair only the name is
        renamed; the group is returned unchanged.
    """
    if name is None:
        return None
    exact_dict = exact_dict or {}
    repl_dict = repl_dict or {}
    if _is_pair(name):
        return (replace_name(name[0], exact_dict, repl_dict), name[1])
    exact = _exact_lookup(name, exact_dict)
    if exact is not None:
        return exact
    return transformer(name, repl_dict)
