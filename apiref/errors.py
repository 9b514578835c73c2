"""Error types raised while generating the API reference."""


class ApiRefError(Exception):
    """Base class for failures that abort a generation run."""


class ModelError(ApiRefError):
    """The documentation model is malformed or inconsistent."""


class RepositoryError(ApiRefError):
    """A git operation against the tags cache failed."""


class ConfigError(ApiRefError):
    """The configuration or the project metadata cannot be read."""
