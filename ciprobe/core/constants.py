"""Constants used throughout ciprobe."""


# Configuration
DEFAULT_CONFIG_FILE = "ciprobeconfig.yml"
CONFIG_PATH_ENV_VAR = "CIPROBE_CONFIG"

# Name of the task with a setup/execute version pair
GITVERSION_TASK_NAME = "gitversion"

# Credentials
USERNAME_ENV_VAR = "AZURE_USERNAME"
TOKEN_ENV_VAR = "AZURE_TOKEN"
DEFAULT_DOTENV_FILE = ".env"
CREDENTIALS_SEPARATOR = ":"
