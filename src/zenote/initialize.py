# SPDX-License-Identifier: MIT

from zenote import configuration
from zenote.logger import configure_logging
from zenote.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    # Loading back-fills defaults; flushing writes the file on first run
    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    configure_logging(config["log_level"])
