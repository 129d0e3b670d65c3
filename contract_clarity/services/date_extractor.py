# DEPENDENCIES
import math
import uuid
from typing import List
from re import Match
from typing import Optional
from typing import Sequence
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta
from contract_clarity.utils.logger import log_info
from contract_clarity.config.settings import settings
from contract_clarity.utils.logger import ContractClarityLogger
from contract_clarity.config.date_patterns import DatePattern
from contract_clarity.config.date_patterns import DURATION_REGEX
from contract_clarity.config.date_patterns import DATE_PATTERNS
from contract_clarity.config.date_patterns import ISO_DATE_REGEX
from contract_clarity.services.data_models import ContractDate
from contract_clarity.config.date_patterns import SLASH_DATE_REGEX
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.config.date_patterns import MONTH_NAME_DATE_REGEX


SECONDS_PER_DAY = 24 * 60 * 60


def resolve_duration(duration: str, from_date: datetime) -> Optional[datetime]:
    """
    Add a relative duration ("90 days", "6 months") to a date

    Days and weeks add days; months and years use calendar arithmetic.
    Strings without a duration return `from_date` unchanged, amounts that
    leave the representable calendar return None
    """
    match = DURATION_REGEX.search(duration)

    if not match:
        return from_date

    unit = match.group(2).lower()

    try:
        # Digit strings past the interpreter's int conversion limit also raise ValueError
        amount = int(match.group(1))

        if unit.startswith("day"):
            return from_date + timedelta(days = amount)

        if unit.startswith("week"):
            return from_date + timedelta(weeks = amount)

        if unit.startswith("month"):
            return from_date + relativedelta(months = amount)

        return from_date + relativedelta(years = amount)

    except (ValueError, OverflowError):
        return None


def parse_date(date_string: str, tzinfo = None) -> Optional[datetime]:
    """
    Parse a captured date string: ISO `YYYY-MM-DD`, then `MM/DD/YYYY`, then
    "Month D, YYYY". Unparseable strings yield None

    Arguments:
    ----------
        date_string { str }      : Captured text

        tzinfo      { tzinfo }   : Zone attached to the resulting midnight

    Returns:
    --------
             { datetime }        : Midnight of the parsed day, or None
    """
    trimmed = date_string.strip()

    try:
        iso_match = ISO_DATE_REGEX.search(trimmed)
        if iso_match:
            return datetime(int(iso_match.group(1)), int(iso_match.group(2)), int(iso_match.group(3)), tzinfo = tzinfo)

        slash_match = SLASH_DATE_REGEX.search(trimmed)
        if slash_match:
            return datetime(int(slash_match.group(3)), int(slash_match.group(1)), int(slash_match.group(2)), tzinfo = tzinfo)

        month_match = MONTH_NAME_DATE_REGEX.search(trimmed)
        if month_match:
            parsed = date_parser.parse(month_match.group(0))
            return datetime(parsed.year, parsed.month, parsed.day, tzinfo = tzinfo)

    except (ValueError, OverflowError):
        # Impossible calendar values ("2027-02-30") are skipped like any unparseable capture
        return None

    return None


class DateExtractor:
    """
    Regex-driven extraction of contract dates relative to an anchor time

    Only dates strictly after `now` are kept, deduplicated by ISO timestamp
    (first occurrence wins across patterns and sentences), sorted ascending
    """
    def __init__(self, patterns: Sequence[DatePattern] = DATE_PATTERNS, description_length: int = None):
        self.patterns           = tuple(patterns)
        self.description_length = settings.DATE_DESCRIPTION_LENGTH if description_length is None else description_length


    @ContractClarityLogger.log_execution_time("extract_dates")
    def extract(self, text: str, now: Optional[datetime] = None) -> List[ContractDate]:
        """
        Find contract-relevant dates in raw document text

        Arguments:
        ----------
            text { str }      : Raw or normalized document text

            now  { datetime } : Extraction time; durations resolve from it and
                                earlier dates are dropped (defaults to current UTC time)

        Returns:
        --------
                 { list }     : ContractDate entries sorted by date
        """
        now   = now or datetime.now(timezone.utc)
        dates = list()
        seen  = set()

        for sentence in TextProcessor.split_rough_sentences(text or ""):
            for pattern in self.patterns:
                for match in pattern.regex.finditer(sentence):
                    resolved = self._resolve(match, pattern, now)

                    if (resolved is None) or (resolved <= now):
                        continue

                    date_key = resolved.isoformat()

                    if date_key in seen:
                        continue

                    seen.add(date_key)
                    dates.append(self._build(resolved, pattern, sentence.strip(), now))

        dates.sort(key = lambda contract_date: contract_date.date)

        log_info("Contract dates extracted", count = len(dates))

        return dates


    @staticmethod
    def _resolve(match: Match, pattern: DatePattern, now: datetime) -> Optional[datetime]:
        groups = match.groupdict()

        if pattern.extract_duration and groups.get("amount") and groups.get("unit"):
            return resolve_duration(f"{groups['amount']} {groups['unit']}", now)

        if groups.get("date"):
            return parse_date(groups["date"], tzinfo = now.tzinfo)

        return None


    def _build(self, resolved: datetime, pattern: DatePattern, sentence: str, now: datetime) -> ContractDate:
        days_until = math.ceil((resolved - now).total_seconds() / SECONDS_PER_DAY)

        return ContractDate(id          = f"{pattern.type.value}-{uuid.uuid4().hex}",
                            date        = resolved,
                            type        = pattern.type,
                            title       = pattern.title,
                            description = sentence[:self.description_length],
                            context     = sentence,
                            days_until  = days_until,
                           )


def extract_dates(text: str, now: Optional[datetime] = None) -> List[ContractDate]:
    """
    Extract dates with the default pattern table
    """
    return DateExtractor().extract(text, now = now)


# Reminder operations over an explicit list of dates
def find_date(dates: Sequence[ContractDate], date_id: str) -> Optional[ContractDate]:
    return next((contract_date for contract_date in dates if (contract_date.id == date_id)), None)


def add_reminder(dates: Sequence[ContractDate], date_id: str, reminder_date: datetime) -> bool:
    """
    Attach a reminder to the date with `date_id`; False when no such date
    """
    contract_date = find_date(dates, date_id)

    if contract_date is None:
        return False

    contract_date.has_reminder  = True
    contract_date.reminder_date = reminder_date

    return True


def remove_reminder(dates: Sequence[ContractDate], date_id: str) -> bool:
    contract_date = find_date(dates, date_id)

    if contract_date is None:
        return False

    contract_date.has_reminder  = False
    contract_date.reminder_date = None

    return True


def due_reminders(dates: Sequence[ContractDate], now: datetime) -> List[ContractDate]:
    """
    Dates whose reminder time has been reached
    """
    return [contract_date for contract_date in dates if contract_date.has_reminder and contract_date.reminder_date and (contract_date.reminder_date <= now)]
