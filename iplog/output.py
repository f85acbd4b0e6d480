"""IP Log - Result file and report output"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .errors import FileAccessError, IpLogError
from .log import get_logger
from .models import AggregateResult, RunReport
from .subnet import address_range

log = get_logger(__name__)


def write_results(result: AggregateResult, filepath) -> int:
    """Write one '<ip>;<count>' line per address. Returns the number of lines."""
    path = Path(filepath)
    lines = result.lines()
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for line in lines:
                f.write(line + '\n')
    except OSError as e:
        raise FileAccessError(str(path), e.strerror or str(e)) from e
    log.debug("Wrote %d lines to %s", len(lines), path)
    return len(lines)


def format_address_range(report: RunReport) -> str:
    if report.address_filter is None:
        return "all addresses"
    low, high = address_range(report.address_filter.start, report.address_filter.mask)
    return f"{low} - {high} ({report.address_filter.start} mask {report.address_filter.mask})"


def print_report(report: RunReport, console: Console):
    time_range = report.time_range
    console.print(Panel.fit(
        f"Time range: [cyan]{time_range.start:%d.%m.%Y} - {time_range.end:%d.%m.%Y}[/]\n"
        f"Address range: [cyan]{escape(format_address_range(report))}[/]\n"
        f"Matches: [{'green' if report.matches else 'yellow'}]{report.matches:,}[/]\n"
        f"Elapsed: [cyan]{report.elapsed_ms} ms[/]\n"
        f"Saved to: [green]{escape(str(report.output_path))}[/]",
        title="IP Log Summary",
        border_style="cyan"
    ))


def print_error(error: IpLogError, console: Console):
    console.print(Text.assemble(("Error: ", "red"), str(error)))
