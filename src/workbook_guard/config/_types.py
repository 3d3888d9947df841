"""Exception raised by the config layer."""


class ConfigError(Exception):
    """A configuration source could not be read."""
