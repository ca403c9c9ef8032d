"""
Core Report Records

Plain data classes for the values the reporter computes:
    - DateRecord (year/month/day triple)
    - ReportState (everything the procedure computes, grouped)

These objects carry no behavior. They hold values, nothing more.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class DateRecord:
    """
    A date-like record with three independent integer fields.

    No cross-field validation is performed: month=13 is accepted.
    A field left as None was never assigned.

    Properties:
        year: Calendar year (e.g., 2018)
        month: Month number (e.g., 10)
        day: Day of month (e.g., 1)
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    def is_assigned(self) -> bool:
        """True once all three fields hold a value."""
        return None not in (self.year, self.month, self.day)


@dataclass
class ReportState:
    """
    Local state produced by one run of the reporter.

    Properties:
        integer_value:
            start + 2 * (20 + end) over the code range bounds

        real_value:
            Sum of the exponent, fractional and trailing-dot literals

        sequence:
            Fixed-capacity recurrence result, seq[i] = seq[i-1] * i * i

        start_date:
            Record populated with 2018/10/1

        end_date:
            Record of the same type, declared and never assigned
    """

    integer_value: int
    real_value: float
    sequence: Tuple[int, ...] = field(default_factory=tuple)
    start_date: DateRecord = field(default_factory=DateRecord)
    end_date: DateRecord = field(default_factory=DateRecord)
