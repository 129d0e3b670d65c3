# DEPENDENCIES
import re
from enum import Enum
from re import Pattern
from dataclasses import dataclass


class DateType(str, Enum):
    PROBATION_END = "probation-end"
    NOTICE_PERIOD = "notice-period"
    RENEWAL       = "renewal"
    START         = "start"
    VESTING       = "vesting"
    REVIEW        = "review"
    OTHER         = "other"


@dataclass(frozen = True)
class DatePattern:
    """
    One contract-date regex

    Duration patterns expose named groups `amount` and `unit`, absolute
    patterns expose `date`; the vesting pattern exposes both
    """
    regex             : Pattern
    type              : DateType
    title             : str
    extract_duration  : bool


MONTH_NAMES   = r"(?:January|February|March|April|May|June|July|August|September|October|November|December)"

# Evaluated in this order against every rough sentence
DATE_PATTERNS = (DatePattern(regex            = re.compile(r"probation(?:ary)?\s+period\s+(?:of\s+)?(?P<amount>\d+)\s+(?P<unit>days?|weeks?|months?)", re.IGNORECASE),
                             type             = DateType.PROBATION_END,
                             title            = "Probation Period End",
                             extract_duration = True,
                            ),
                 DatePattern(regex            = re.compile(r"notice\s+period\s+(?:of\s+)?(?P<amount>\d+)\s+(?P<unit>days?|weeks?|months?)", re.IGNORECASE),
                             type             = DateType.NOTICE_PERIOD,
                             title            = "Notice Period",
                             extract_duration = True,
                            ),
                 DatePattern(regex            = re.compile(r"(?:contract|agreement)\s+renewal\s+(?:on|date|of)?\s+(?P<date>[A-Za-z]+\s+\d{1,2},?\s+\d{4}|[A-Za-z]+\s+\d{1,2}|" + MONTH_NAMES + r")", re.IGNORECASE),
                             type             = DateType.RENEWAL,
                             title            = "Contract Renewal Date",
                             extract_duration = False,
                            ),
                 DatePattern(regex            = re.compile(r"(?:annual|quarterly|six-month)\s+(?:performance\s+)?review\s+(?:on|date|of)?\s+(?P<date>[A-Za-z]+\s+\d{1,2},?\s+\d{4})", re.IGNORECASE),
                             type             = DateType.REVIEW,
                             title            = "Performance Review Date",
                             extract_duration = False,
                            ),
                 DatePattern(regex            = re.compile(r"(?:vesting|stock\s+options?)\s+(?:schedule|date|vests?\s+on)\s+(?:(?P<date>[A-Za-z]+\s+\d{1,2},?\s+\d{4})|after\s+(?P<amount>\d+)\s+(?P<unit>years?|months?))", re.IGNORECASE),
                             type             = DateType.VESTING,
                             title            = "Vesting Schedule Date",
                             extract_duration = True,
                            ),
                 DatePattern(regex            = re.compile(r"(?P<date>\d{4}-\d{2}-\d{2}|\d{1,2}/\d{1,2}/\d{4}|" + MONTH_NAMES + r"\s+\d{1,2},?\s+\d{4})", re.IGNORECASE),
                             type             = DateType.OTHER,
                             title            = "Important Date",
                             extract_duration = False,
                            ),
                )

# Sub-formats tried in priority order when parsing a captured date string
ISO_DATE_REGEX        = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
SLASH_DATE_REGEX      = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
MONTH_NAME_DATE_REGEX = re.compile(MONTH_NAMES + r"\s+\d{1,2},?\s+\d{4}", re.IGNORECASE)

# Relative duration inside a captured span
DURATION_REGEX        = re.compile(r"(\d+)\s+(days?|weeks?|months?|years?)", re.IGNORECASE)

# Loose splitter used only by the date extractor
ROUGH_SENTENCE_BOUNDARY = re.compile(r"[.!?]\s+")
