"""IP Log - Error types"""

from typing import Optional


class IpLogError(Exception):
    """Base class for every error the tool reports to the user"""


class InvalidDateFormatError(IpLogError):
    def __init__(self, value: str):
        super().__init__(
            f"Invalid date '{value}': expected dd.MM.yyyy or yyyy.MM.dd"
        )
        self.value = value


class InvalidAddressError(IpLogError):
    def __init__(self, value: str):
        super().__init__(f"Invalid IPv4 address '{value}'")
        self.value = value


class MissingRequiredOptionError(IpLogError):
    def __init__(self, option: str):
        super().__init__(f"Missing required option --{option}")
        self.option = option


class InconsistentOptionsError(IpLogError):
    """Options that are individually valid but cannot be combined"""


class FileAccessError(IpLogError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot access {path}: {reason}")
        self.path = path


class MalformedLogLineError(IpLogError):
    def __init__(self, line_number: int, line: str, reason: Optional[str] = None):
        message = f"Malformed log line {line_number}: {line!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ConfigError(IpLogError):
    """Unreadable or invalid configuration file"""
