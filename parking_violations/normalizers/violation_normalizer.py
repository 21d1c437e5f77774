import logging

from collections.abc import Mapping
from typing import Any, Iterable, List

from parking_violations.constants.open_data.needed_fields import \
    VIOLATION_FIELD_ALIASES
from parking_violations.models.parking_violation import ParkingViolation

LOG = logging.getLogger(__name__)


def normalize_violation(raw: Any) -> ParkingViolation:
    """Map a raw open data record onto a ParkingViolation.

    Each attribute takes the first of its aliases holding a non-empty value;
    attributes with no usable alias become empty strings.
    """
    if not isinstance(raw, Mapping):
        LOG.debug(f'Skipping fields of non-mapping record: {raw!r}')
        return ParkingViolation()

    return ParkingViolation(**{
        attribute: _resolve_field(raw, aliases)
        for attribute, aliases in VIOLATION_FIELD_ALIASES.items()})


def normalize_violations(raws: Iterable[Any]) -> List[ParkingViolation]:
    return [normalize_violation(raw) for raw in raws]


def _resolve_field(raw: Mapping, aliases: Iterable[str]) -> str:
    for alias in aliases:
        value: str = _stringify(raw.get(alias))

        if value:
            return value

    return ''


def _stringify(value: Any) -> str:
    if value is None:
        return ''
    elif isinstance(value, str):
        return value
    elif isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, float) and value.is_integer():
        # json numbers such as 5.0 display as 5
        return str(int(value))

    return str(value)
