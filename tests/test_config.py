import json

import pytest

from iplog.config import build_run_options, load_config, merge_options
from iplog.errors import (
    ConfigError, InconsistentOptionsError, InvalidDateFormatError, MissingRequiredOptionError
)


def options(**overrides):
    base = {
        'file-log': 'in.log',
        'file-output': 'out.txt',
        'address-start': None,
        'address-mask': None,
        'time-start': '01.01.2023',
        'time-end': '2023.01.31',
    }
    base.update(overrides)
    return base


def test_load_config_accepts_underscores(tmp_path):
    path = tmp_path / "iplog.json"
    path.write_text(json.dumps({"file_log": "a.log", "time-start": "01.01.2023"}))
    assert load_config(path) == {"file-log": "a.log", "time-start": "01.01.2023"}


@pytest.mark.parametrize("content", ['{"colour": "red"}', '[1, 2]', '{not json'])
def test_load_config_rejects(tmp_path, content):
    path = tmp_path / "iplog.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.json")


def test_cli_overrides_config():
    merged = merge_options(
        {'file-log': 'cli.log', 'time-end': None},
        {'file-log': 'config.log', 'time-end': '02.01.2023'},
    )
    assert merged['file-log'] == 'cli.log'
    assert merged['time-end'] == '02.01.2023'
    assert merged['address-start'] is None


def test_build_run_options_defaults_mask():
    run_options = build_run_options(options(**{'address-start': '10.0.0.0'}))
    assert run_options.address_filter.mask == '0.0.0.0'
    assert run_options.time_range.start.day == 1
    assert run_options.time_range.end.day == 31


def test_no_address_start_means_no_filter():
    assert build_run_options(options()).address_filter is None


def test_mask_without_start_rejected():
    with pytest.raises(InconsistentOptionsError):
        build_run_options(options(**{'address-mask': '255.0.0.0'}))


def test_missing_required_option():
    with pytest.raises(MissingRequiredOptionError) as exc:
        build_run_options(options(**{'file-output': None}))
    assert exc.value.option == 'file-output'


def test_bad_date_checked_before_mask():
    with pytest.raises(InvalidDateFormatError):
        build_run_options(options(**{'time-start': '2023-01-01', 'address-mask': '255.0.0.0'}))


def test_explicit_empty_mask_is_kept():
    run_options = build_run_options(options(**{'address-start': '10.0.0.0', 'address-mask': ''}))
    assert run_options.address_filter.mask == ''
