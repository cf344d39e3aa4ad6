"""Constants used throughout mise-devcontainer."""


# Devcontainer defaults
DEFAULT_NAME = "mise"
DEFAULT_IMAGE = "mcr.microsoft.com/devcontainers/base:ubuntu"
MISE_FEATURE = "ghcr.io/devcontainers-extra/features/mise:1"
MISE_VSCODE_EXTENSION = "hverlin.mise-vscode"

# Shared mise data volume
MISE_DATA_VOLUME_NAME = "mise-data-volume"
MISE_DATA_MOUNT_TARGET = "/mnt/mise-data"
MISE_DATA_VOLUME_ENV = "MISE_DATA_VOLUME"

# Output location for --write
DEVCONTAINER_DIR_NAME = ".devcontainer"
DEVCONTAINER_FILE_NAME = "devcontainer.json"

# Project configuration
DATA_DIR_NAME = ".mise-devcontainer"
CONFIG_FILE_NAME = "config.json"

# Environment variables for option defaults
NAME_ENVVAR = "MISE_DEVCONTAINER_NAME"
IMAGE_ENVVAR = "MISE_DEVCONTAINER_IMAGE"
