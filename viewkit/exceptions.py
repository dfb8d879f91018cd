class ViewkitError(Exception):
    # base exception for all package-specific errors.
    pass

class InvalidArgumentError(ViewkitError, TypeError):
    # a function was called with an argument of the wrong kind.
    pass

class ConfigError(ViewkitError):
    # errors related to configuration files or option hosts.
    pass

class DiscoveryError(ViewkitError):
    # errors while compiling glob patterns or resolving files.
    pass
