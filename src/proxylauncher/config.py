"""Runtime settings for ProxyLauncher"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Environment-driven settings (the launch itself is described by the .cfg file)"""

    CONFIG_FILENAME = "proxylauncher.cfg"

    # Command-line option consumed by the launcher instead of being forwarded
    CONFIG_OPTION = "--proxylauncher-config"

    # Explicit config file path, empty means "next to the program"
    CONFIG_PATH = os.getenv("PROXYLAUNCHER_CONFIG", "").strip()

    DIALOGS_ENABLED = os.getenv("PROXYLAUNCHER_DIALOGS", "true").lower() == "true"

    DEBUG = os.getenv("PROXYLAUNCHER_DEBUG", "false").lower() == "true"


config = Config()
