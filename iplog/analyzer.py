"""IP Log - Filtering and aggregation engine"""

from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from .dates import parse_timestamp
from .errors import FileAccessError, IpLogError, MalformedLogLineError
from .log import get_logger
from .models import AddressFilter, AggregateResult, LogEntry, RunOutcome, TimeRange
from .patterns import LINE_SEPARATOR
from .subnet import in_subnet, parse_ipv4

log = get_logger(__name__)


def parse_line(line: str, line_num: int) -> LogEntry:
    """Split '<ip>:<timestamp>' on the first separator."""
    text = line.rstrip('\r\n')
    ip, sep, timestamp_text = text.partition(LINE_SEPARATOR)
    if not sep:
        raise MalformedLogLineError(line_num, text, "missing ':' separator")
    if not ip:
        raise MalformedLogLineError(line_num, text, "empty address")
    try:
        timestamp = parse_timestamp(timestamp_text)
    except ValueError:
        raise MalformedLogLineError(line_num, text, "unparseable timestamp") from None
    return LogEntry(ip=ip, timestamp=timestamp, line_number=line_num)


class LogAggregator:
    """Counts hits per IP inside a time window and an optional subnet"""

    def __init__(self, console=None):
        self.console = console

    def run(self, lines: Iterable[str], time_range: TimeRange,
            address_filter: Optional[AddressFilter] = None) -> RunOutcome:
        try:
            entries = self._parse(lines)
            counts = self._count(entries, time_range)
            if address_filter is not None:
                counts = self._filter_subnet(counts, address_filter)
        except IpLogError as e:
            log.debug("Run aborted: %s", e)
            return RunOutcome(error=e)
        return RunOutcome(result=AggregateResult(counts=counts))

    def analyze_file(self, filepath, time_range: TimeRange,
                     address_filter: Optional[AddressFilter] = None) -> RunOutcome:
        path = Path(filepath)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            return RunOutcome(error=FileAccessError(str(path), getattr(e, 'strerror', None) or str(e)))

        log.info("Read %d lines from %s", len(lines), path)

        if self.console is None:
            return self.run(lines, time_range, address_filter)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True
        ) as progress:
            progress.add_task("Aggregating log...", total=None)
            return self.run(lines, time_range, address_filter)

    def _parse(self, lines: Iterable[str]) -> List[LogEntry]:
        return [parse_line(line, i) for i, line in enumerate(lines, 1)]

    def _count(self, entries: List[LogEntry], time_range: TimeRange) -> dict:
        counts = Counter(e.ip for e in entries if e.timestamp in time_range)
        log.debug("%d of %d entries inside %s - %s, %d distinct addresses",
                  sum(counts.values()), len(entries),
                  time_range.start, time_range.end, len(counts))
        return dict(counts)

    def _filter_subnet(self, counts: dict, address_filter: AddressFilter) -> dict:
        start = parse_ipv4(address_filter.start)
        mask = parse_ipv4(address_filter.mask)

        # Ordered as strings, so '10.0.0.10' precedes '10.0.0.9'
        ordered = sorted(counts.items(), key=lambda item: item[0])
        kept = {ip: count for ip, count in ordered if in_subnet(ip, start, mask)}
        log.debug("Subnet %s/%s kept %d of %d addresses",
                  start, mask, len(kept), len(ordered))
        return kept
