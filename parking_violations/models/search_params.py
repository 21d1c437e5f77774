from dataclasses import dataclass
from typing import Mapping, Optional

from parking_violations import settings
from parking_violations.constants import L10N
from parking_violations.services.constants.exceptions import \
    ValidationException


@dataclass(frozen=True)
class SearchParams:
    """ Represents a violation search to be submitted to the open data apis """
    license_plate: Optional[str] = None
    ticket_number: Optional[str] = None
    state: str = 'NY'
    borough: Optional[str] = None
    limit: int = settings.DEFAULT_RESULT_LIMIT
    offset: int = 0

    @classmethod
    def from_request_args(cls, args: Mapping[str, str]) -> 'SearchParams':
        license_plate: Optional[str] = (args.get('licensePlate') or '').strip() or None
        ticket_number: Optional[str] = (args.get('ticketNumber') or '').strip() or None

        if not license_plate and not ticket_number:
            raise ValidationException(L10N.MISSING_SEARCH_TERM_STRING)

        try:
            limit = int(args.get('limit') or settings.DEFAULT_RESULT_LIMIT)
            offset = int(args.get('offset') or 0)
        except ValueError:
            raise ValidationException(L10N.INVALID_PAGINATION_STRING)

        return cls(
            license_plate=license_plate,
            ticket_number=ticket_number,
            state=(args.get('state') or 'NY').strip().upper(),
            borough=args.get('borough'),
            limit=min(max(limit, 1), settings.MAX_RESULT_LIMIT),
            offset=max(offset, 0))
