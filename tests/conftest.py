import pytest
from click.testing import CliRunner

from ciprobe.core.constants import CONFIG_PATH_ENV_VAR, TOKEN_ENV_VAR, USERNAME_ENV_VAR


SAMPLE_CONFIG = """\
task_states:
  gitversion:
    - setup_version: "0.9.7"
      execute_version: "0.9.7"
    - setup_version: "3.0.0"
      execute_version: "3.0.3"
  other_tasks:
    DotNetCoreCLI:
      - "2"
      - "2.210.0"
    NuGetCommand:
      - "2.222.0"
"""


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def sample_document():
    """Provides a parsed configuration document."""
    return {
        "task_states": {
            "gitversion": [
                {"setup_version": "0.9.7", "execute_version": "0.9.7"},
                {"setup_version": "3.0.0", "execute_version": "3.0.3"},
            ],
            "other_tasks": {
                "DotNetCoreCLI": ["2", "2.210.0"],
                "NuGetCommand": ["2.222.0"],
            },
        }
    }


@pytest.fixture
def config_file(tmp_path):
    """Writes the sample configuration to a temporary file."""
    path = tmp_path / "ciprobeconfig.yml"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real CI credentials and config overrides out of every test."""
    monkeypatch.delenv(USERNAME_ENV_VAR, raising=False)
    monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
