# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from termtrack import configuration
from termtrack.repository.configuration import CONFIGURATION_REPO
from termtrack.repository.counter import COUNTER_REPO
from termtrack.repository.entry import ENTRY_REPO
from termtrack.repository.slot import open_slot_store
from termtrack.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    __configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])

    # Both stores share one backend, chosen here for the whole process
    store = open_slot_store(config["storage"], configuration.DATA_PATH)
    ENTRY_REPO.use_store(store)
    COUNTER_REPO.use_store(store)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
