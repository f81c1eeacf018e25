class OgMetaError(Exception):
    """Base error for the OpenGraph metadata plugin."""


class ConfigError(OgMetaError):
    pass


class StorageUnavailableError(OgMetaError):
    """The host metadata store could not be read or written."""


class UnknownContentTypeError(OgMetaError):
    """Raised in strict mode when a `type` value is not a known OpenGraph type."""

    def __init__(self, value: str):
        super().__init__(f"Unknown OpenGraph content type: {value!r}")
        self.value = value
