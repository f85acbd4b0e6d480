"""IP Log - Option merging and validation"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from .dates import parse_date
from .errors import ConfigError, InconsistentOptionsError, MissingRequiredOptionError
from .log import get_logger
from .models import AddressFilter, TimeRange
from .patterns import DEFAULT_MASK

log = get_logger(__name__)

OPTION_NAMES = [
    'file-log',
    'file-output',
    'address-start',
    'address-mask',
    'time-start',
    'time-end',
]

REQUIRED_OPTIONS = ['file-log', 'file-output', 'time-start', 'time-end']


@dataclass
class RunOptions:
    """Validated options for one run"""
    file_log: str
    file_output: str
    time_range: TimeRange
    address_filter: Optional[AddressFilter]


def load_config(filepath) -> Dict[str, str]:
    """
    Read a JSON object of option defaults.

    Keys are long option names; 'file_log' is accepted for 'file-log'.
    """
    path = Path(filepath)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    config = {}
    for key, value in data.items():
        name = str(key).replace('_', '-')
        if name not in OPTION_NAMES:
            raise ConfigError(f"Unknown option '{key}' in config {path}")
        if value is not None:
            config[name] = str(value)
    log.debug("Loaded %d options from %s", len(config), path)
    return config


def merge_options(cli: Mapping[str, Optional[str]], config: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Command line values win over config values."""
    merged = {}
    for name in OPTION_NAMES:
        value = cli.get(name)
        merged[name] = value if value is not None else config.get(name)
    return merged


def build_run_options(options: Mapping[str, Optional[str]]) -> RunOptions:
    for name in REQUIRED_OPTIONS:
        if not options.get(name):
            raise MissingRequiredOptionError(name)

    start = parse_date(options['time-start'])
    end = parse_date(options['time-end'])
    time_range = TimeRange(start=start, end=end)

    address_start = options.get('address-start')
    address_mask = options.get('address-mask')
    if address_start is None and address_mask is not None:
        raise InconsistentOptionsError("--address-mask cannot be used without --address-start")

    address_filter = None
    if address_start is not None:
        address_filter = AddressFilter(start=address_start, mask=DEFAULT_MASK if address_mask is None else address_mask)

    return RunOptions(
        file_log=options['file-log'],
        file_output=options['file-output'],
        time_range=time_range,
        address_filter=address_filter,
    )
