import logging

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from parking_violations import settings
from parking_violations.models.response.open_data_service_response import \
    OpenDataServiceResponse
from parking_violations.models.user import User

LOG = logging.getLogger(__name__)

debug_bp = Blueprint('debug', __name__, url_prefix='/api/debug')


@debug_bp.route('/open-data')
def check_open_data():
    response: OpenDataServiceResponse = current_app.extensions[
        'violation_search_aggregator'].open_data_service.check_connection()

    if not response.success:
        return jsonify({
            'status': 'NYC API connection failed',
            'error': response.message}), 500

    return jsonify({
        'status': 'NYC API connection successful',
        'recordCount': len(response.data),
        'sampleFields': sorted(response.data[0].keys())[:10] if response.data else []})


@debug_bp.route('/database')
def check_database():
    try:
        user_count: int = User.count()
    except SQLAlchemyError as exc:
        LOG.error(f'Database test error: {exc}')

        return jsonify({
            'status': 'Database connection failed',
            'error': str(exc),
            'databaseUrl': 'Set' if settings.DATABASE_URL else 'Not set'}), 500

    return jsonify({
        'status': 'Database connection successful',
        'userCount': user_count,
        'databaseUrl': 'Set' if settings.DATABASE_URL else 'Not set'})
