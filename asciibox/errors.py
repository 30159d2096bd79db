class BoxError(Exception):
    pass


class ConfigurationError(BoxError):
    pass


class StateLockedError(BoxError):
    pass


class UnsupportedChildError(BoxError):
    pass


# Reserved: overflowing lists and paragraphs are truncated silently.
class CapacityExceededError(BoxError):
    pass
