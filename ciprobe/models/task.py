"""Task identity and valid state models."""
from dataclasses import dataclass
from typing import Union

from ..core.constants import GITVERSION_TASK_NAME
from .config import GitVersionState


@dataclass(frozen=True)
class GitVersionTask:
    """The gitversion task, validated against setup/execute version pairs."""

    @property
    def display_name(self) -> str:
        return GITVERSION_TASK_NAME


@dataclass(frozen=True)
class GenericTask:
    """Any other task, identified by its lowercase name."""
    name: str

    @property
    def display_name(self) -> str:
        return self.name


SupportedTask = Union[GitVersionTask, GenericTask]


@dataclass(frozen=True)
class GitVersionValidState:
    """A valid state of the gitversion task."""
    state: GitVersionState

    @property
    def setup_version(self) -> str:
        return self.state.setup_version

    @property
    def execute_version(self) -> str:
        return self.state.execute_version

    def versions(self) -> tuple:
        """Versions carried by this state, setup first."""
        return (self.setup_version, self.execute_version)


@dataclass(frozen=True)
class DefaultValidState:
    """A valid state of a generic task."""
    version: str

    def versions(self) -> tuple:
        """Versions carried by this state."""
        return (self.version,)


TaskValidState = Union[GitVersionValidState, DefaultValidState]


def task_from_name(name: str) -> SupportedTask:
    """Resolve a task name as reported by the CI provider to its identity."""
    lowered = name.lower()
    if lowered == GITVERSION_TASK_NAME:
        return GitVersionTask()
    return GenericTask(lowered)
