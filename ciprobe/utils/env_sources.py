"""Key/value sources for credential lookup."""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from ..core.constants import DEFAULT_DOTENV_FILE

logger = logging.getLogger(__name__)


class KeyValueSource:
    """Read-only source of named string values."""

    def get(self, name: str) -> Optional[str]:
        raise NotImplementedError


class MappingSource(KeyValueSource):
    """Source backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, Optional[str]]):
        self.values = dict(values)

    def get(self, name: str) -> Optional[str]:
        return self.values.get(name)


class EnvironmentSource(KeyValueSource):
    """Source backed by the process environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, name: str) -> Optional[str]:
        return self.environ.get(name)


class DotenvSource(KeyValueSource):
    """Source backed by a ``.env`` file.

    The file is parsed on first access and never written back to
    ``os.environ``. A missing file behaves as an empty source.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_DOTENV_FILE):
        self.path = Path(path)
        self._values: Optional[Dict[str, Optional[str]]] = None

    def _load(self) -> Dict[str, Optional[str]]:
        if self._values is None:
            if self.path.is_file():
                logger.debug(f"Loading environment from {self.path}")
                self._values = dict(dotenv_values(self.path))
            else:
                self._values = {}
        return self._values

    def get(self, name: str) -> Optional[str]:
        return self._load().get(name)


class ChainedSource(KeyValueSource):
    """Source returning the first value found across several sources."""

    def __init__(self, *sources: KeyValueSource):
        self.sources = sources

    def get(self, name: str) -> Optional[str]:
        for source in self.sources:
            value = source.get(name)
            if value is not None:
                return value
        return None
