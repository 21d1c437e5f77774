from parking_violations.constants.open_data import endpoints

from parking_violations.models.search_params import SearchParams
from parking_violations.services.apis.queries import utils


def get_violations_query(search_params: SearchParams) -> str:

    where_clause = utils.format_query_string(_build_where_clause(search_params=search_params))

    return (
        f"{endpoints.OPEN_PARKING_AND_CAMERA_VIOLATIONS_ENDPOINT}?{where_clause}"
        f"&$order=issue_date DESC"
        f"&$limit={search_params.limit}"
        f"&$offset={search_params.offset}"
    )

def get_connection_check_query() -> str:
    return f"{endpoints.OPEN_PARKING_AND_CAMERA_VIOLATIONS_ENDPOINT}?$limit=1"

def _build_where_clause(search_params: SearchParams) -> str:
    if search_params.ticket_number:
        return (
          f"$where=summons_number="
                 f"'{utils.sanitize_search_term(search_params.ticket_number)}'"
        )

    return (
      f"$where=plate='{utils.sanitize_search_term(search_params.license_plate)}' "
             f"AND state='{utils.sanitize_search_term(search_params.state)}'"
    )
