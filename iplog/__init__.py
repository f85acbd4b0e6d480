"""IP Log package"""

from .patterns import VERSION
from .errors import (
    IpLogError, InvalidDateFormatError, InvalidAddressError, MissingRequiredOptionError,
    InconsistentOptionsError, FileAccessError, MalformedLogLineError, ConfigError
)
from .models import LogEntry, TimeRange, AddressFilter, AggregateResult, RunOutcome, RunReport
from .dates import parse_date, parse_timestamp
from .subnet import in_subnet, parse_ipv4, address_range
from .analyzer import LogAggregator, parse_line
from .output import write_results, print_report, print_error

__all__ = [
    'VERSION', 'LogAggregator', 'parse_line', 'parse_date', 'parse_timestamp',
    'in_subnet', 'parse_ipv4', 'address_range', 'write_results', 'print_report', 'print_error',
    'LogEntry', 'TimeRange', 'AddressFilter', 'AggregateResult', 'RunOutcome', 'RunReport',
    'IpLogError', 'InvalidDateFormatError', 'InvalidAddressError', 'MissingRequiredOptionError',
    'InconsistentOptionsError', 'FileAccessError', 'MalformedLogLineError', 'ConfigError',
]
