class LlmsTxtError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(LlmsTxtError):
    # errors related to configuration.
    pass

class DiscoveryError(LlmsTxtError):
    # errors while walking the documentation tree.
    pass

class NotFoundError(DiscoveryError, FileNotFoundError):
    # a directory or document in the tree does not exist.
    pass

class AccessDeniedError(DiscoveryError, PermissionError):
    # a directory could not be listed or a document could not be read.
    pass

class OutputError(LlmsTxtError):
    # errors while writing the generated artifact.
    pass


def translate_os_error(error: OSError) -> OSError:
    # maps a filesystem error onto the discovery taxonomy, keeping errno, message and filename.
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return NotFoundError(error.errno, error.strerror, error.filename)
    if isinstance(error, PermissionError):
        return AccessDeniedError(error.errno, error.strerror, error.filename)
    return error
