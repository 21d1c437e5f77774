import logging
import requests
import requests_futures.sessions

from requests.adapters import HTTPAdapter
from typing import Any, Dict, List
from urllib3.util.retry import Retry

from parking_violations import settings
from parking_violations.models.response.open_data_service_response import (
    OpenDataServiceResponse)
from parking_violations.models.search_params import SearchParams
from parking_violations.services.apis.queries import \
    parking_violations_database
from parking_violations.services.constants.exceptions import \
    APIFailureException

LOG = logging.getLogger(__name__)


class OpenDataService:

    HEADERS = {'Accept': 'application/json'}

    def __init__(self):
        # Set up retry ability
        s_req = requests_futures.sessions.FuturesSession(max_workers=9)

        retries = Retry(total=5,
                        backoff_factor=0.1,
                        status_forcelist=[403, 500, 502, 503, 504],
                        raise_on_status=False)

        s_req.mount('https://', HTTPAdapter(max_retries=retries))

        self.api = s_req

    def search_violations(self,
                          search_params: SearchParams) -> OpenDataServiceResponse:
        """Fetch the raw violation records matching a plate or ticket."""
        query_string: str = parking_violations_database.get_violations_query(
            search_params=search_params)

        LOG.info(f'Querying open data for {search_params}')

        try:
            response: Dict[str, Any] = self._perform_query(
                query_string=query_string)

            data: List[Dict[str, Any]] = response['data']

            LOG.debug(f'Open data returned {len(data)} violations: {data}')

            return OpenDataServiceResponse(
                data=data,
                success=True)

        except APIFailureException as exc:
            LOG.error(str(exc))

            return OpenDataServiceResponse(
                message=str(exc),
                success=False)

    def check_connection(self) -> OpenDataServiceResponse:
        try:
            response: Dict[str, Any] = self._perform_query(
                query_string=parking_violations_database.get_connection_check_query())

            return OpenDataServiceResponse(
                data=response['data'],
                success=True)

        except APIFailureException as exc:
            LOG.error(str(exc))

            return OpenDataServiceResponse(
                message=str(exc),
                success=False)

    def _add_token(self, url: str) -> str:
        if settings.NYC_OPEN_DATA_TOKEN:
            return f'{url}&$$app_token={settings.NYC_OPEN_DATA_TOKEN}'

        return url

    def _perform_query(self, query_string: str) -> Dict[str, Any]:
        full_url: str = self._add_token(query_string)

        try:
            result = self.api.get(full_url, headers=self.HEADERS).result()
        except requests.exceptions.RequestException as exc:
            raise APIFailureException(
                f'transport error when accessing {query_string}: {exc}') from exc

        if result.status_code in range(200, 300):
            # Only attempt to read json on a successful response.
            try:
                data = result.json()
            except ValueError as exc:
                raise APIFailureException(
                    f'invalid json when accessing {query_string}') from exc

            return {'data': data if isinstance(data, list) else []}
        elif result.status_code in range(300, 400):
            raise APIFailureException(
                f'redirect error when accessing {query_string}')
        elif result.status_code in range(400, 500):
            raise APIFailureException(
                f'user error when accessing {query_string}')
        elif result.status_code in range(500, 600):
            raise APIFailureException(
                f'server error when accessing {query_string}')
        else:
            raise APIFailureException(
                f'unknown error when accessing {query_string}')
