"""Defaults for the web player. Override any key with a SORTVIZ_<KEY> env var."""


class DefaultConfig:
    SECRET_KEY = "replace-with-a-random-secret"  # change for production
    LOG_LEVEL = "INFO"

    DEFAULT_ALGORITHM = "bubble"

    # array size (number of bars)
    MIN_SIZE = 5
    MAX_SIZE = 120
    DEFAULT_SIZE = 30

    # seconds per step while autoplaying
    MIN_SPEED = 0.01
    MAX_SPEED = 1.00
    DEFAULT_SPEED = 0.25

    # random values
    MIN_VALUE = 10
    MAX_VALUE = 310

    # user supplied arrays
    CUSTOM_MAX_VALUE = 500
    CUSTOM_MAX_COUNT = 100
