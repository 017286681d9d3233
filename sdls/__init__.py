"""sdls - add magnet links to Synology Download Station from the terminal."""

from importlib.metadata import PackageNotFoundError, version

from .client import DownloadStationClient
from .config import Config, load_config
from .exceptions import (
    AuthenticationError,
    ConfigError,
    SDLSError,
    SecretSourceError,
    SubmissionError,
)

__all__ = [
    "Config",
    "DownloadStationClient",
    "load_config",
    "SDLSError",
    "ConfigError",
    "SecretSourceError",
    "AuthenticationError",
    "SubmissionError",
]

try:
    __version__ = version("sdls")
except PackageNotFoundError:
    __version__ = "0.1.0"
