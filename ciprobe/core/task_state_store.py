"""Store of known-good task versions."""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import ValidationError

from ..models.config import GitVersionState, ProbeConfig, TaskStates
from ..models.task import (
    DefaultValidState,
    GenericTask,
    GitVersionTask,
    GitVersionValidState,
    SupportedTask,
    TaskValidState,
    task_from_name,
)
from ..services.exceptions import ConfigParseError
from .constants import GITVERSION_TASK_NAME
from .version_compare import version_eq

logger = logging.getLogger(__name__)


class TaskStateStore:
    """Read-only view of the valid version states of every task.

    Generic task names are lowercased once, when the store is built. Lookups
    never fold case again.
    """

    def __init__(self, gitversion: Tuple[GitVersionState, ...],
                 other_tasks: Dict[str, Tuple[str, ...]]):
        self._gitversion = gitversion
        self._other_tasks = other_tasks

    @classmethod
    def load(cls, raw_task_states: Union[ProbeConfig, TaskStates, Mapping[str, Any]]) -> 'TaskStateStore':
        """Build a store from a parsed configuration document.

        Accepts a validated ``ProbeConfig`` or ``TaskStates``, or the raw
        mapping produced by the YAML parser.

        Raises:
            ConfigParseError: If the document does not have the expected shape.
        """
        if isinstance(raw_task_states, ProbeConfig):
            task_states = raw_task_states.task_states
        elif isinstance(raw_task_states, TaskStates):
            task_states = raw_task_states
        else:
            try:
                task_states = ProbeConfig.model_validate(raw_task_states).task_states
            except ValidationError as e:
                raise ConfigParseError(f"Failed to parse config file: {e}") from e

        store = cls(
            gitversion=tuple(task_states.gitversion),
            other_tasks={name: tuple(versions) for name, versions in task_states.other_tasks.items()},
        )
        store._normalize_task_names()
        logger.debug(
            f"Loaded {len(store._gitversion)} gitversion states and "
            f"{len(store._other_tasks)} other tasks"
        )
        return store

    def _normalize_task_names(self) -> None:
        """Lowercase generic task names; later duplicates win."""
        normalized: Dict[str, Tuple[str, ...]] = {}
        for name, versions in self._other_tasks.items():
            key = name.lower()
            if key in normalized:
                logger.debug(f"Task name {name!r} overrides an earlier entry for {key!r}")
            normalized[key] = versions
        self._other_tasks = normalized

    @property
    def gitversion_states(self) -> Tuple[GitVersionState, ...]:
        """Accepted gitversion setup/execute pairs, in document order."""
        return self._gitversion

    @property
    def other_tasks(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only map of lowercase task name to accepted versions."""
        return MappingProxyType(self._other_tasks)

    def get_valid_states(self, task: SupportedTask) -> List[TaskValidState]:
        """Get the valid states of a task; unknown tasks have none."""
        if isinstance(task, GitVersionTask):
            return [GitVersionValidState(state) for state in self._gitversion]
        versions = self._other_tasks.get(task.name, ())
        return [DefaultValidState(version) for version in versions]

    def get_all_tasks(self) -> List[SupportedTask]:
        """Get every known task, gitversion first."""
        tasks: List[SupportedTask] = [GitVersionTask()]
        tasks.extend(GenericTask(name) for name in self._other_tasks)
        return tasks

    def is_valid_version(self, task_name: str, version: str) -> bool:
        """Check whether ``version`` is listed for ``task_name`` verbatim.

        Only the gitversion task name is matched case-insensitively; generic
        task names are looked up exactly as given.
        """
        if task_name.lower() == GITVERSION_TASK_NAME:
            return any(
                version == state.setup_version or version == state.execute_version
                for state in self._gitversion
            )
        return version in self._other_tasks.get(task_name, ())

    def matches_version(self, task: Union[SupportedTask, str], version: str) -> bool:
        """Check ``version`` against the valid states using ``version_eq``."""
        if isinstance(task, str):
            task = task_from_name(task)
        return any(
            version_eq(version, candidate)
            for state in self.get_valid_states(task)
            for candidate in state.versions()
        )
