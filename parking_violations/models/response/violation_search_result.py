from dataclasses import dataclass, field
from typing import Any, Dict, List

from parking_violations.models.parking_violation import ParkingViolation


@dataclass(frozen=True)
class ViolationSearchResult:
    """ Represents the normalized, filtered results of a violation search """
    license_plate: str
    total_count: int = 0
    violations: List[ParkingViolation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'violations': [violation.to_dict() for violation in self.violations],
            'totalCount': self.total_count,
            'licensePlate': self.license_plate,
        }
