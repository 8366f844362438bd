"""Environment configuration helpers."""

from arbor.utilities.env.config import Configuration as Configuration
