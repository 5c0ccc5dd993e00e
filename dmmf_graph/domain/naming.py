"""
Naming convention utilities for the DMMF graph builder.

Every graph entity holds a FormattedNames value derived from its base name,
so renderers can pick whichever casing the generated code needs.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

import inflect


# Initialize inflect engine for pluralization
p = inflect.engine()


def to_snake_case(name: str) -> str:
    """
    Convert camelCase or PascalCase to snake_case.

    Example:
        >>> to_snake_case("UserAccount")
        'user_account'
        >>> to_snake_case("XMLHttpRequest")
        'xml_http_request'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def to_pascal_case(name: str) -> str:
    """
    Convert camelCase or snake_case to PascalCase without changing inner capitals.

    Example:
        >>> to_pascal_case("findMany")
        'FindMany'
        >>> to_pascal_case("user_account")
        'UserAccount'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def to_camel_case(name: str) -> str:
    """Convert a name to camelCase, e.g. 'UserProfile' -> 'userProfile'."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def to_upper_case_space(name: str) -> str:
    """Split a name into upper-cased words, e.g. 'UserProfile' -> 'USER PROFILE'."""
    return to_snake_case(name).replace("_", " ").upper()


def pluralize(word: str) -> str:
    """Pluralize the last word of a camelCase name, e.g. 'userProfile' -> 'userProfiles'."""
    if not word:
        return ""

    head, last = re.match(r"(.*?)([A-Z]?[a-z0-9]*)$", word).groups()
    if not last:
        return word + "s"
    return head + (p.plural_noun(last) or last + "s")


@dataclass(frozen=True)
class FormattedNames:
    """Name variants derived from an entity's base name."""

    original: str
    camel_case: str
    pascal_case: str
    snake_case: str
    upper_case_space: str
    plural_camel_case: str


@lru_cache(maxsize=None)
def format_names(name: str) -> FormattedNames:
    """Compute every name variant for a base name."""
    camel_case = to_camel_case(name)
    return FormattedNames(
        original=name,
        camel_case=camel_case,
        pascal_case=to_pascal_case(name),
        snake_case=to_snake_case(name),
        upper_case_space=to_upper_case_space(name),
        plural_camel_case=pluralize(camel_case),
    )
