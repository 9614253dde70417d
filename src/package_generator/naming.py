"""Package name validation and the identifiers derived from a valid name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

__all__ = [
    "DerivedIdentifiers",
    "MAX_PACKAGE_NAME_LENGTH",
    "PACKAGE_PREFIX",
    "ValidationResult",
    "derive_identifiers",
    "get_global_key",
    "get_index_file_name",
    "validate_package_name",
]


PACKAGE_PREFIX = "ckeditor5-"
MAX_PACKAGE_NAME_LENGTH = 214

TOO_LONG = "Name can not be longer than 214 characters."
WRONG_PATTERN = "Name has to follow the correct pattern."
INVALID_CHARACTERS = "Name contains invalid characters."
CAPITAL_LETTERS = "Capital letters are not allowed."

_PACKAGE_NAME_PATTERN = re.compile(rf"@([^/]+)/{re.escape(PACKAGE_PREFIX)}([^/]+)")
# Characters left untouched by encodeURIComponent() on top of quote()'s own safe set.
_URI_COMPONENT_SAFE = "!~*'()"
_FORBIDDEN_CHARACTERS = re.compile(r"[~'!()*]")
_CAPITAL_LETTERS = re.compile(r"[A-Z]")
_DASH_LETTER = re.compile(r"-([a-z])")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate_package_name`.

    ``reasons`` lists every violated rule in the order the rules are checked
    and is empty exactly when the name is valid.
    """

    reasons: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.reasons

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True, slots=True)
class DerivedIdentifiers:
    """Values computed from a valid package name."""

    directory_name: str
    global_key: str
    output_file_name: str


def _utf16_length(value: str) -> int:
    # npm counts UTF-16 code units, characters outside the BMP count twice.
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def _is_uri_component_safe(value: str) -> bool:
    return quote(value, safe=_URI_COMPONENT_SAFE, errors="surrogatepass") == value


def validate_package_name(name: str) -> ValidationResult:
    """Check ``name`` against the ``@scope/ckeditor5-name`` convention.

    npm refuses names longer than 214 characters, names with capital letters
    and names containing characters that need escaping in a URL. Generated
    packages must additionally live in a scope and carry the ``ckeditor5-``
    prefix. When the name does not have that shape the character checks are
    skipped since there is no scope or suffix to look at.
    """

    reasons: list[str] = []

    def fail(reason: str) -> None:
        if reason not in reasons:
            reasons.append(reason)

    if _utf16_length(name) > MAX_PACKAGE_NAME_LENGTH:
        fail(TOO_LONG)

    match = _PACKAGE_NAME_PATTERN.fullmatch(name)
    if match is None:
        fail(WRONG_PATTERN)
        return ValidationResult(tuple(reasons))

    scope, suffix = match.groups()
    if not (_is_uri_component_safe(scope) and _is_uri_component_safe(suffix)):
        fail(INVALID_CHARACTERS)

    if _FORBIDDEN_CHARACTERS.search(name):
        fail(INVALID_CHARACTERS)

    if _CAPITAL_LETTERS.search(name):
        fail(CAPITAL_LETTERS)

    return ValidationResult(tuple(reasons))


def _strip_prefix(local_name: str) -> str:
    if local_name.startswith(PACKAGE_PREFIX):
        return local_name[len(PACKAGE_PREFIX):]
    return local_name


def get_global_key(local_name: str) -> str:
    """Return the key the bundle is exposed under, e.g. ``rich-text`` -> ``richText``."""

    return _DASH_LETTER.sub(lambda match: match.group(1).upper(), _strip_prefix(local_name))


def get_index_file_name(local_name: str) -> str:
    """Return the name of the built file, always with a ``.js`` extension."""

    return f"{_strip_prefix(local_name)}.js"


def derive_identifiers(name: str) -> DerivedIdentifiers:
    """Derive directory, global key and output file names from ``name``.

    ``name`` must already have passed :func:`validate_package_name`. Other
    input is not checked and produces meaningless values.
    """

    local_name = name.split("/")[1]
    return DerivedIdentifiers(
        directory_name=local_name,
        global_key=get_global_key(local_name),
        output_file_name=get_index_file_name(local_name),
    )
