import logging

from typing import List

from parking_violations.filters.borough_filter import filter_by_borough
from parking_violations.models.parking_violation import ParkingViolation
from parking_violations.models.response.open_data_service_response import \
    OpenDataServiceResponse
from parking_violations.models.response.violation_search_result import \
    ViolationSearchResult
from parking_violations.models.search_params import SearchParams
from parking_violations.normalizers.violation_normalizer import \
    normalize_violations
from parking_violations.services.apis.open_data_service import OpenDataService
from parking_violations.services.constants.exceptions import \
    APIFailureException

LOG = logging.getLogger(__name__)


class ViolationSearchAggregator:

    def __init__(self, open_data_service: OpenDataService = None):
        self.open_data_service = open_data_service or OpenDataService()

    def search(self, search_params: SearchParams) -> ViolationSearchResult:
        """Look up, normalize and borough-filter the violations for a
        plate or ticket number.
        """
        LOG.debug(f'search_params: {search_params}')

        open_data_response: OpenDataServiceResponse = \
            self.open_data_service.search_violations(search_params)

        if not open_data_response.success:
            raise APIFailureException(open_data_response.message)

        violations: List[ParkingViolation] = normalize_violations(
            open_data_response.data or [])

        LOG.info(f'Found {len(violations)} violations')

        violations = filter_by_borough(violations, search_params.borough)

        return ViolationSearchResult(
            license_plate=self._display_search_term(search_params),
            total_count=len(violations),
            violations=violations)

    def _display_search_term(self, search_params: SearchParams) -> str:
        if search_params.license_plate:
            return search_params.license_plate.upper()

        return search_params.ticket_number or ''
