"""Quaternion arithmetic over integer and floating point scalar types."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from .utils import logger

from ._quaternion import *
from ._functions import *
