# DEPENDENCIES
from typing import Optional
from typing import Sequence
from datetime import datetime
from datetime import timezone
from contract_clarity.services.data_models import ContractDate


PRODUCT_ID = "-//Contract Clarity//Contract Dates//EN"
UID_DOMAIN = "contractclarity.com"


def _utc_stamp(moment: datetime) -> str:
    """
    iCalendar UTC basic format: 20270115T000000Z (naive values are taken as UTC)
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo = timezone.utc)

    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")


def export_icalendar(dates: Sequence[ContractDate], now: Optional[datetime] = None) -> str:
    """
    Render contract dates as an iCalendar document, one VEVENT per date

    Arguments:
    ----------
        dates { list }     : Dates to export

        now   { datetime } : DTSTAMP of every event (defaults to current UTC time)

    Returns:
    --------
           { str }         : CRLF-delimited VCALENDAR text
    """
    dtstamp = _utc_stamp(now or datetime.now(timezone.utc))
    lines   = ["BEGIN:VCALENDAR",
               "VERSION:2.0",
               f"PRODID:{PRODUCT_ID}",
               "CALSCALE:GREGORIAN",
               "METHOD:PUBLISH",
               "X-WR-CALNAME:Contract Dates",
               "X-WR-TIMEZONE:UTC",
              ]

    for contract_date in dates:
        lines.extend(["BEGIN:VEVENT",
                      f"DTSTART:{_utc_stamp(contract_date.date)}",
                      f"DTSTAMP:{dtstamp}",
                      f"SUMMARY:{_escape(contract_date.title)}",
                      f"DESCRIPTION:{_escape(contract_date.description)}",
                      f"UID:{contract_date.id}@{UID_DOMAIN}",
                      "END:VEVENT",
                     ])

    lines.append("END:VCALENDAR")

    return "\r\n".join(lines) + "\r\n"
