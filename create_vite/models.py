"""Pydantic v2 models shared by the prompt flow and the scaffolder."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OverwriteDecision(str, Enum):
    """How to treat a non-empty target directory.

    Values match the ``--overwrite`` command line vocabulary.
    """
    REMOVE = "yes"
    CANCEL = "no"
    IGNORE = "ignore"


class ResolvedSelection(BaseModel):
    """Everything the prompt chain decided, ready for scaffolding."""

    model_config = ConfigDict(frozen=True)

    target_dir: str = Field(..., min_length=1, description="Target directory relative to the cwd")
    package_name: str = Field(..., min_length=1, description="Manifest name override")
    template_id: str = Field(..., min_length=1, description="Catalog id, SWC marker stripped")
    is_swc: bool = Field(default=False, description="Whether the SWC marker was present")
    overwrite: Optional[OverwriteDecision] = Field(
        default=None, description="Answer to the overwrite question, if it was asked"
    )
