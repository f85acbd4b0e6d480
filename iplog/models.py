"""IP Log - Data models"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import InconsistentOptionsError, IpLogError
from .patterns import DEFAULT_MASK, OUTPUT_SEPARATOR


@dataclass(frozen=True)
class LogEntry:
    """Parsed log entry"""
    ip: str
    timestamp: datetime
    line_number: int


@dataclass(frozen=True)
class TimeRange:
    """Inclusive time window"""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise InconsistentOptionsError(
                f"time-start {self.start:%d.%m.%Y} is after time-end {self.end:%d.%m.%Y}"
            )

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(frozen=True)
class AddressFilter:
    """Subnet given as a start address and a mask"""
    start: str
    mask: str = DEFAULT_MASK


@dataclass
class AggregateResult:
    """Hit count per IP, in output order"""
    counts: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def items(self) -> List[Tuple[str, int]]:
        return list(self.counts.items())

    def lines(self) -> List[str]:
        return [f"{ip}{OUTPUT_SEPARATOR}{count}" for ip, count in self.counts.items()]


@dataclass
class RunOutcome:
    """Either an aggregate result or the error that stopped the run"""
    result: Optional[AggregateResult] = None
    error: Optional[IpLogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> AggregateResult:
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class RunReport:
    """Summary shown after a successful run"""
    time_range: TimeRange
    address_filter: Optional[AddressFilter]
    matches: int
    elapsed_ms: int
    output_path: str
