class IawkError(Exception):
    """Base class for fatal errors that stop a scan."""


class ConfigurationError(IawkError):
    pass


class PatternError(ConfigurationError):
    def __init__(self, pattern, index, reason):
        self.pattern = pattern
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid regular expression #{index + 1} '{pattern}': {reason}")


class InputOpenError(IawkError):
    pass


class OutputOpenError(IawkError):
    pass


class OutputWriteError(IawkError):
    pass


class InputReadError(IawkError):
    pass
