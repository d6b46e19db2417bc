"""Validation and normalisation of ``package.json`` names."""

from __future__ import annotations

import re

DEFAULT_PROJECT_NAME = "vite-project"

# Optional ``@scope/`` prefix, then a name that may not start with ``.`` or ``_``.
_VALID_NAME = re.compile(
    r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*"
)


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* is usable as the ``name`` of a package.json.

    Examples::

        is_valid_package_name("my-app")        -> True
        is_valid_package_name("@acme/ui-kit")  -> True
        is_valid_package_name("My App")        -> False
        is_valid_package_name("_private")      -> False
    """
    return _VALID_NAME.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Coerce an arbitrary project name into a valid package name.

    * Trims and lowercases the input.
    * Replaces whitespace runs with a hyphen.
    * Drops a leading ``.`` or ``_``.
    * Replaces every run of other illegal characters with one hyphen.

    The result always passes :func:`is_valid_package_name` and feeding it
    back in returns it unchanged.  Input that normalises to nothing yields
    :data:`DEFAULT_PROJECT_NAME`.

    Examples::

        to_valid_package_name("  My Cool App ") -> "my-cool-app"
        to_valid_package_name("_hidden.thing")  -> "hidden-thing"
    """
    result = name.strip().lower()
    result = re.sub(r"\s+", "-", result)
    result = re.sub(r"^[._]", "", result)
    result = re.sub(r"[^a-z0-9\-~]+", "-", result)
    return result or DEFAULT_PROJECT_NAME


def format_target_dir(target_dir: str | None) -> str:
    """Trim whitespace and trailing slashes from a directory argument."""
    if target_dir is None:
        return ""
    return re.sub(r"/+$", "", target_dir.strip())
