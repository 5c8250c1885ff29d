"""Configuration models for ciprobe."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class GitVersionState(BaseModel):
    """One accepted setup/execute version pair for the gitversion task."""

    model_config = ConfigDict(frozen=True)

    setup_version: str = Field(..., description="Version of the gitversion setup task")
    execute_version: str = Field(..., description="Version of the gitversion execute task")


class TaskStates(BaseModel):
    """Known-good versions for every tracked task."""

    gitversion: List[GitVersionState]
    other_tasks: Dict[str, List[str]] = Field(
        ..., description="Map of task name to accepted version strings"
    )


class ProbeConfig(BaseModel):
    """Top-level configuration document."""

    task_states: TaskStates
