"""Package manager detection from the ``npm_config_user_agent`` string.

Every Node package manager exports a user agent of the form
``"<name>/<version> <platform-info>"`` to the processes it spawns, e.g.::

    npm/10.2.4 node/v20.11.0 darwin arm64 workspaces/false
    yarn/1.22.19 npm/? node/v18.19.0 linux x64
    pnpm/8.15.1 npm/? node/v20.11.0 linux x64
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PACKAGE_MANAGER = "npm"


class PackageManagerInfo(BaseModel):
    """The package manager that invoked the scaffolder."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Executable name, e.g. 'npm', 'yarn', 'pnpm', 'bun'")
    version: str = Field(default="", description="Opaque version label")

    @property
    def is_yarn1(self) -> bool:
        """Yarn classic does not understand ``pkg@version`` in ``yarn create``."""
        return self.name == "yarn" and self.version.startswith("1.")


def detect_package_manager(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse a user agent string into a :class:`PackageManagerInfo`.

    Returns ``None`` when *user_agent* is missing or blank.  No validation
    is applied to the version part.
    """
    if not user_agent or not user_agent.strip():
        return None
    token = re.split(r"\s+", user_agent.strip(), maxsplit=1)[0]
    name, _, version = token.partition("/")
    return PackageManagerInfo(name=name, version=version)


def resolve_package_manager(user_agent: str | None) -> PackageManagerInfo:
    """Like :func:`detect_package_manager` but falls back to npm."""
    return detect_package_manager(user_agent) or PackageManagerInfo(
        name=DEFAULT_PACKAGE_MANAGER
    )
