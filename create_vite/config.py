"""create-vite configuration.

Typed run configuration built from the process environment.  Uses a Pydantic
v2 model so paths are coerced and validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from create_vite.naming import DEFAULT_PROJECT_NAME
from create_vite.package_manager import PackageManagerInfo, resolve_package_manager

USER_AGENT_ENV = "npm_config_user_agent"
TEMPLATES_DIR_ENV = "CREATE_VITE_TEMPLATES_DIR"

_BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "scaffolder" / "templates"


class ScaffoldConfig(BaseModel):
    """Settings for a single scaffolding run.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to the ``ScaffoldOrchestrator``.
    """

    cwd: Path = Field(default_factory=Path.cwd, description="Directory the run resolves targets against")
    default_target_dir: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    templates_dir: Path = Field(
        default=_BUNDLED_TEMPLATES_DIR,
        description="Directory holding the template-<id> skeletons",
    )
    user_agent: str | None = Field(
        default=None, description="Raw npm_config_user_agent of the invoking package manager"
    )

    @property
    def package_manager(self) -> PackageManagerInfo:
        """Invoking package manager, npm when undetected."""
        return resolve_package_manager(self.user_agent)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            npm_config_user_agent, CREATE_VITE_TEMPLATES_DIR.

        Keyword arguments take precedence over the environment.
        """
        kwargs: dict[str, Any] = {"user_agent": os.environ.get(USER_AGENT_ENV)}
        if os.environ.get(TEMPLATES_DIR_ENV):
            kwargs["templates_dir"] = Path(os.environ[TEMPLATES_DIR_ENV])
        kwargs.update(overrides)
        return cls(**kwargs)
