class ReductError(Exception):
    """ Base class for all Reduct errors"""
    pass

class ReductTypeError(ReductError):
    """ Raised when a value is used in a way its variant does not support"""

class ReductSyntaxError(ReductError):
    """ Raised inside the reader; surfaced to callers as a read-error value"""

class ReductConfigError(ReductError):
    """ Raised when a configuration value cannot be parsed"""
