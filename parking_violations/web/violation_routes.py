import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from parking_violations.constants import L10N
from parking_violations.models.response.violation_search_result import \
    ViolationSearchResult
from parking_violations.models.search_params import SearchParams
from parking_violations.services.constants.exceptions import \
    APIFailureException, ValidationException

LOG = logging.getLogger(__name__)

violations_bp = Blueprint('violations', __name__)


@violations_bp.route('/api/violations')
def search_violations():
    LOG.info(f'Violations API called: {request.args.to_dict()}')

    try:
        search_params = SearchParams.from_request_args(request.args)
    except ValidationException as exc:
        return jsonify({'error': str(exc)}), 400

    try:
        result: ViolationSearchResult = \
            current_app.extensions['violation_search_aggregator'].search(search_params)
    except APIFailureException as exc:
        LOG.error(f'Error fetching violations: {exc}')

        return jsonify({
            'error': L10N.UPSTREAM_FAILURE_STRING,
            'details': str(exc),
            'violations': [],
            'totalCount': 0}), 500

    return jsonify(result.to_dict())


@violations_bp.route('/')
def index():
    context = {
        'args': request.args,
        'boroughs': L10N.BOROUGH_OPTIONS,
        'error': None,
        'result': None}

    if not request.args:
        return render_template('violations.html', **context)

    try:
        search_params = SearchParams.from_request_args(request.args)
        context['result'] = \
            current_app.extensions['violation_search_aggregator'].search(search_params)
    except ValidationException as exc:
        context['error'] = str(exc)
    except APIFailureException as exc:
        LOG.error(f'Error fetching violations: {exc}')
        context['error'] = L10N.UPSTREAM_FAILURE_STRING

    return render_template('violations.html', **context)
