import logging

from typing import FrozenSet, List, Optional, Sequence

from parking_violations.constants.borough_codes import ALL_BOROUGHS, \
    BOROUGH_CODES
from parking_violations.models.parking_violation import ParkingViolation

LOG = logging.getLogger(__name__)


def filter_by_borough(violations: Sequence[ParkingViolation],
                      borough: Optional[str]) -> List[ParkingViolation]:
    """Keep the violations whose county code belongs to the given borough.

    No borough, a blank one or 'All Boroughs' keeps everything. A borough
    name that is not in the code table matches nothing.
    """
    if is_all_boroughs(borough):
        return list(violations)

    county_codes: FrozenSet[str] = BOROUGH_CODES.get(
        borough.strip().upper(), frozenset())

    if not county_codes:
        LOG.info(f'Unrecognized borough {borough!r}, no violations will match')

    filtered_violations: List[ParkingViolation] = [
        violation for violation in violations
        if violation.violation_county.upper() in county_codes]

    LOG.debug(f'Filtered to {len(filtered_violations)} violations for {borough}')

    return filtered_violations


def is_all_boroughs(borough: Optional[str]) -> bool:
    return not borough or not borough.strip() or \
        borough.strip().upper() == ALL_BOROUGHS


def borough_for_county_code(county_code: Optional[str]) -> Optional[str]:
    if not county_code:
        return None

    boros = [name for name, codes in BOROUGH_CODES.items()
             if county_code.upper() in codes]

    return boros[0] if boros else None
