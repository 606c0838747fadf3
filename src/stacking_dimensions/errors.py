"""Errors raised by the order-volume extension point."""


class HookError(Exception):
    """Base class for extension point errors."""


class DuplicateExtensionError(HookError):
    def __init__(self, name: str):
        super().__init__(f"Extension already registered: {name}")
        self.name = name


class UnknownExtensionError(HookError, KeyError):
    def __init__(self, name: str):
        super().__init__(f"No extension registered under: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class InvalidVolumeError(HookError, ValueError):
    """A volume value that is neither absent nor in the cubic form of the requested unit."""


class ExtensionFailedError(HookError):
    """An extension raised or returned an invalid value while the policy is 'abort'."""

    def __init__(self, extension_name: str, cause: BaseException):
        super().__init__(f"Order volume extension '{extension_name}' failed: {cause}")
        self.extension_name = extension_name
        self.cause = cause
