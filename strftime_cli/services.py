"""Business logic for resolving time arguments and formatting time ranges."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Callable

from dateutil.relativedelta import relativedelta

from .models import (
    FIXED_TEMPLATES,
    FormatId,
    FormatSpec,
    FormattedPair,
    TextPair,
    TimestampPair,
    TimeUnit,
)
from .utils import local_now, shift_fixed, start_of_day, to_unix

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


class TimeArgumentError(ValueError):
    """Raised when a time argument cannot be resolved."""


class InvalidNumberError(TimeArgumentError):
    pass


class InvalidUnitError(TimeArgumentError):
    pass


class InvalidFormatError(ValueError):
    pass


class TimeResolver:
    def __init__(self, clock: Callable[[], datetime] = local_now) -> None:
        self.clock = clock

    def now(self) -> datetime:
        return self.clock()

    def resolve(self, arg: str, reference: datetime | None = None) -> datetime:
        """Turn ``now``, ``today`` or a relative offset such as ``-2h`` into a datetime.

        ``reference`` defaults to a fresh reading of the clock.
        """
        if reference is None:
            reference = self.now()

        if arg == "now":
            return reference
        if arg == "today":
            return start_of_day(reference)
        if arg.startswith(("-", "+")):
            return self.resolve_relative(arg, reference)
        raise TimeArgumentError(f"invalid time argument: {arg}")

    def resolve_relative(self, arg: str, reference: datetime) -> datetime:
        digits, unit_code = arg[1:-1], arg[-1:]
        if not _DIGITS.fullmatch(digits):
            raise InvalidNumberError(f"invalid time number: {arg}")
        number = int(digits)
        if arg.startswith("-"):
            number = -number

        try:
            unit = TimeUnit(unit_code)
        except ValueError as exc:
            raise InvalidUnitError(f"invalid time unit: {unit_code}") from exc

        logger.debug("Shifting %s by %d%s", reference.isoformat(), number, unit.value)
        try:
            return self._shift(reference, number, unit)
        except (OverflowError, ValueError) as exc:
            raise TimeArgumentError(f"time offset out of range: {arg}") from exc

    def _shift(self, reference: datetime, number: int, unit: TimeUnit) -> datetime:
        # Minutes and hours are exact durations; larger units keep the wall-clock time.
        if unit is TimeUnit.MINUTE:
            return shift_fixed(reference, timedelta(minutes=number))
        if unit is TimeUnit.HOUR:
            return shift_fixed(reference, timedelta(hours=number))
        if unit is TimeUnit.DAY:
            return reference + relativedelta(days=number)
        if unit is TimeUnit.WEEK:
            return reference + relativedelta(weeks=number)
        return reference + relativedelta(months=number)


class FormatService:
    def select(self, format_id: str, template: str | None = None) -> FormatSpec:
        try:
            selected = FormatId(format_id)
        except ValueError as exc:
            raise InvalidFormatError(f"Invalid format identifier: {format_id}") from exc

        if selected is FormatId.CUSTOM:
            if template is None:
                raise InvalidFormatError("Custom format requires a template argument")
            return FormatSpec(selected, template)
        return FormatSpec(selected, FIXED_TEMPLATES.get(selected))

    def format_pair(self, spec: FormatSpec, start: datetime, end: datetime) -> FormattedPair:
        if spec.is_timestamp:
            return TimestampPair(start=to_unix(start), end=to_unix(end))
        if spec.template is None:
            raise RuntimeError(f"Format {spec.format_id.value} has no template")
        return TextPair(start=start.strftime(spec.template), end=end.strftime(spec.template))


def build_services(clock: Callable[[], datetime] = local_now) -> tuple[TimeResolver, FormatService]:
    return TimeResolver(clock), FormatService()
