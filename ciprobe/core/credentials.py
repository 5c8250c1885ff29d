"""CI provider credential resolution."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..services.exceptions import CredentialsFormatError, CredentialsNotFound
from ..utils.env_sources import ChainedSource, DotenvSource, EnvironmentSource, KeyValueSource
from .constants import CREDENTIALS_SEPARATOR, TOKEN_ENV_VAR, USERNAME_ENV_VAR

logger = logging.getLogger(__name__)


class CredentialSource(Enum):
    """Where a set of credentials was found."""
    ARGUMENT = "argument"
    ENVIRONMENT = "environment"
    DOTFILE = "dotfile"


@dataclass(frozen=True)
class Credentials:
    """Username and personal access token for the CI provider."""
    username: str
    token: str = field(repr=False)
    source: CredentialSource = field(default=CredentialSource.ARGUMENT, compare=False)

    @property
    def masked_token(self) -> str:
        """Token with everything but the last four characters hidden."""
        if len(self.token) <= 4:
            return "*" * len(self.token)
        return "*" * (len(self.token) - 4) + self.token[-4:]

    @classmethod
    def from_string(cls, credentials: str) -> 'Credentials':
        """Parse a ``username:token`` string.

        Raises:
            CredentialsFormatError: Unless the string has exactly two parts.
        """
        parts = credentials.split(CREDENTIALS_SEPARATOR)
        if len(parts) != 2:
            raise CredentialsFormatError("Invalid credentials format. Expected 'username:token'")
        return cls(username=parts[0], token=parts[1], source=CredentialSource.ARGUMENT)

    @classmethod
    def load(cls, cli_credentials: Optional[str] = None,
             environment: Optional[KeyValueSource] = None,
             dotfile: Optional[KeyValueSource] = None) -> 'Credentials':
        """Resolve credentials from the first source that has both values.

        Sources are tried in order: the explicit ``username:token`` argument,
        the environment, then the environment with the dotfile filling gaps.

        Raises:
            CredentialsFormatError: If ``cli_credentials`` is malformed.
            CredentialsNotFound: If no source has both username and token.
        """
        if cli_credentials is not None:
            logger.debug("Using credentials from argument")
            return cls.from_string(cli_credentials)

        environment = environment if environment is not None else EnvironmentSource()
        credentials = cls._from_source(environment, CredentialSource.ENVIRONMENT)
        if credentials:
            return credentials

        dotfile = dotfile if dotfile is not None else DotenvSource()
        credentials = cls._from_source(ChainedSource(environment, dotfile), CredentialSource.DOTFILE)
        if credentials:
            return credentials

        raise CredentialsNotFound("Credentials not found in environment or .env file")

    @classmethod
    def _from_source(cls, source: KeyValueSource,
                     kind: CredentialSource) -> Optional['Credentials']:
        username = source.get(USERNAME_ENV_VAR)
        token = source.get(TOKEN_ENV_VAR)
        if username is None or token is None:
            return None
        logger.debug(f"Using credentials from {kind.value}")
        return cls(username=username, token=token, source=kind)
