"""Application configuration"""

import logging
import os

from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .roles import Roles

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(
    format=LOG_FORMAT,
    datefmt=DATE_FORMAT,
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
)
logging.getLogger("discord.http").setLevel(logging.WARNING)
logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
roles = Roles(_RAW_CONFIG)


class Config:
    core = core
    roles = roles


__all__ = ["core", "roles", "Config"]
