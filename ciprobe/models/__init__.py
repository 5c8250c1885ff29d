"""Models for ciprobe."""

from .config import GitVersionState, TaskStates, ProbeConfig
from .task import (
    GitVersionTask,
    GenericTask,
    SupportedTask,
    GitVersionValidState,
    DefaultValidState,
    TaskValidState,
    task_from_name,
)

__all__ = [
    'GitVersionState',
    'TaskStates',
    'ProbeConfig',
    'GitVersionTask',
    'GenericTask',
    'SupportedTask',
    'GitVersionValidState',
    'DefaultValidState',
    'TaskValidState',
    'task_from_name',
]
