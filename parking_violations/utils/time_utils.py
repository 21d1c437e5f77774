import re

from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

from parking_violations.constants import L10N

NON_DIGIT_PATTERN = re.compile(r'\D')


def format_violation_time(token: Optional[str]) -> Optional[str]:
    """Turn an HHMM token such as '0730A' into '7:30 AM'.

    Missing input comes back unchanged. Hours are not range checked.
    """
    if not token:
        return token

    # pad the whole token before slicing so '730' reads as '0730'
    digits: str = NON_DIGIT_PATTERN.sub('', str(token)).zfill(4)

    if len(digits) < 4:
        return token

    hour = int(digits[0:2])
    minutes: str = digits[2:4]

    return L10N.DISPLAY_TIME_STRING.format(
        hour % 12 or 12,
        minutes,
        'PM' if hour >= 12 else 'AM')


def format_issue_date(value: Optional[str]) -> Optional[str]:
    if not value:
        return value

    try:
        issue_date: datetime = date_parser.parse(value)
    except (ValueError, OverflowError):
        return value

    return issue_date.strftime(L10N.DISPLAY_DATE_FORMAT)
