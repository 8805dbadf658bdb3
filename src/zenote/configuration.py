# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "zenote"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Import limits
MAX_IMPORT_NOTES = 1000
MAX_TITLE_LENGTH = 500
MAX_TAG_NAME_LENGTH = 20
DEFAULT_MAX_IMPORT_FILE_SIZE = 10 * 1024 * 1024


class Configuration(TypedDict):
    export_prefix: str
    max_import_file_size: int
    json_indent: int
    default_tag_color: str
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "export_prefix": APP_NAME,
        "max_import_file_size": DEFAULT_MAX_IMPORT_FILE_SIZE,
        "json_indent": 2,
        "default_tag_color": "stone",
        "log_level": "WARNING",
    }
