class SuiteError(Exception):
    """Base class for errors raised by the suite's core."""


class MissingParameterError(SuiteError, ValueError):
    def __init__(self, template: str, missing: list[str]):
        self.template = template
        self.missing = missing
        super().__init__(f"Unresolved placeholders {missing} in endpoint template {template!r}")


class TransportError(SuiteError):
    """The request never produced an HTTP response (DNS, refused connection, timeout)."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class NoResponseCapturedError(SuiteError):
    pass


class DeserializationError(SuiteError):
    pass


class MissingAbilityError(SuiteError):
    pass


class NoActorInSpotlightError(SuiteError):
    pass
