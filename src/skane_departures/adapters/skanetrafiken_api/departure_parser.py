"""Parser for departure board entries (Lines/Line)."""

import logging
import re
from datetime import date, datetime, time, timedelta, tzinfo

from skane_departures.adapters.skanetrafiken_api.constants import LINE_TYPE_PRODUCTS
from skane_departures.adapters.skanetrafiken_api.xml_cursor import XmlCursor
from skane_departures.domain.exceptions import ParseError
from skane_departures.domain.models.departure import Departure, Position
from skane_departures.domain.models.line import Line, Product
from skane_departures.domain.models.location import Location, LocationType

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"[0-9]+")
_CLOCK = re.compile(r"([0-9]{1,2}):([0-9]{2})(?::([0-9]{2}))?")


def product_for_line_type(line_type_id: str | None) -> Product:
    """Classify a LineTypeId; unknown codes give Product.NONE."""
    code = (line_type_id or "").strip()
    product = LINE_TYPE_PRODUCTS.get(code, Product.NONE)
    if product is Product.NONE and code:
        logger.debug(f"Unmapped line type id: {code!r}")
    return product


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def line_label(name: str | None, number: str | None, type_name: str | None) -> str:
    """Build the label riders see for a line.

    The feed puts either a product name ("Pågatåg"), a bare number ("3") or
    a full label ("12X") into Name, and the line or train number into No.
    """
    name = name or ""
    number = number or ""
    type_name = type_name or ""

    if not name or name == number:
        return _join(type_name, number)
    if _UNSIGNED_INT.fullmatch(name):
        return _join(type_name, name)
    if name[-1].isdigit():
        return name
    return _join(name, number)


def parse_journey_datetime(value: str, tz: tzinfo) -> datetime:
    """Parse a JourneyDateTime such as "2011-05-19T14:20:00" in the feed's zone.

    Args:
        value: Date and local clock time separated by "T" (or a space).
        tz: Provider timezone; pytz zones are localized, others attached.

    Raises:
        ParseError: If the value is not a valid date and time.
    """
    date_part, separator, time_part = value.strip().partition("T")
    if not separator:
        date_part, separator, time_part = value.strip().partition(" ")
    match = _CLOCK.fullmatch(time_part)
    if not separator or not match:
        raise ParseError(f"Cannot parse journey date time: {value!r}")

    hours, minutes, seconds = match.groups()
    try:
        local = datetime.combine(
            date.fromisoformat(date_part),
            time(int(hours), int(minutes), int(seconds or 0)),
        )
    except ValueError as e:
        raise ParseError(f"Cannot parse journey date time: {value!r}") from e

    localize = getattr(tz, "localize", None)
    if localize is not None:
        return localize(local)
    return local.replace(tzinfo=tz)


def _read_fields(cursor: XmlCursor) -> dict[str, str]:
    """Read the leaf children of the current element, first occurrence wins."""
    fields: dict[str, str] = {}
    while (tag := cursor.peek_name()) is not None:
        value = cursor.value_tag(tag)
        fields.setdefault(tag, value)
    return fields


def _parse_real_time(cursor: XmlCursor) -> dict[str, str]:
    cursor.enter("RealTime")
    fields: dict[str, str] = {}
    if cursor.opt_enter("RealTimeInfo"):
        fields = _read_fields(cursor)
        cursor.skip_exit("RealTimeInfo")
    cursor.skip_exit("RealTime")
    return fields


def _parse_deviation_header(cursor: XmlCursor) -> str | None:
    """Return the first non-empty deviation header."""
    cursor.enter("Deviations")
    header = None
    while cursor.opt_enter("Deviation"):
        fields = _read_fields(cursor)
        cursor.skip_exit("Deviation")
        if header is None and fields.get("Header"):
            header = fields["Header"]
    cursor.skip_exit("Deviations")
    return header


def _shift(moment: datetime, offset: timedelta, tz: tzinfo) -> datetime:
    """Add an offset, fixing up the UTC offset of pytz zones across DST changes."""
    shifted = moment + offset
    normalize = getattr(tz, "normalize", None)
    return normalize(shifted) if normalize is not None else shifted


def _deviation_minutes(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring unparsable departure deviation: {value!r}")
        return None


def parse_departure(cursor: XmlCursor, network: str, tz: tzinfo) -> Departure:
    """Parse the children of an entered Line element.

    Fields not needed for a departure (IsTimingPoint, RunNo, ...) are skipped.

    Args:
        cursor: Cursor inside a Line element.
        network: Network tag for the line.
        tz: Provider timezone for JourneyDateTime.

    Returns:
        Departure in the provider's timezone.

    Raises:
        ParseError: If JourneyDateTime is missing or malformed.
    """
    fields: dict[str, str] = {}
    real_time: dict[str, str] = {}
    message = None

    while (tag := cursor.peek_name()) is not None:
        if tag == "RealTime":
            real_time = _parse_real_time(cursor)
        elif tag == "Deviations":
            message = _parse_deviation_header(cursor) or message
        else:
            fields.setdefault(tag, cursor.value_tag(tag))

    journey = fields.get("JourneyDateTime")
    if not journey:
        raise ParseError(f"Line without JourneyDateTime in {'/'.join(cursor.path)}")
    planned_time = parse_journey_datetime(journey, tz)

    deviation = _deviation_minutes(real_time.get("DepTimeDeviation"))
    predicted_time = None
    if deviation is not None:
        predicted_time = _shift(planned_time, timedelta(minutes=deviation), tz)

    number = fields.get("No", "")
    train_number = fields.get("TrainNo", "")
    if train_number and train_number != "0":
        number = train_number

    stop_point = real_time.get("NewDepPoint") or fields.get("StopPoint")
    towards = fields.get("Towards")

    line = Line(
        network=network,
        product=product_for_line_type(fields.get("LineTypeId")),
        label=line_label(fields.get("Name"), number, fields.get("LineTypeName")),
        id=number or None,
    )
    return Departure(
        planned_time=planned_time,
        predicted_time=predicted_time,
        line=line,
        position=Position(stop_point) if stop_point else None,
        destination=Location(type=LocationType.ANY, name=towards) if towards else None,
        message=message,
    )
