import logging

from flask import Flask
from typing import Any, Dict, Optional

from parking_violations import settings
from parking_violations.db.database import init_database, init_schema
from parking_violations.filters.borough_filter import borough_for_county_code
from parking_violations.services.auth_service import AuthService
from parking_violations.services.plate_watch_service import PlateWatchService
from parking_violations.utils.time_utils import format_issue_date, \
    format_violation_time
from parking_violations.violation_search_aggregator import \
    ViolationSearchAggregator
from parking_violations.web.auth_routes import auth_bp
from parking_violations.web.debug_routes import debug_bp
from parking_violations.web.plate_routes import plates_bp
from parking_violations.web.violation_routes import violations_bp

LOG = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=settings.SECRET_KEY,
        CREATE_SCHEMA=settings.DATABASE_URL.startswith('sqlite'))

    if config:
        app.config.update(config)

    app.extensions['auth_service'] = AuthService()
    app.extensions['plate_watch_service'] = PlateWatchService()
    app.extensions['violation_search_aggregator'] = \
        app.config.get('VIOLATION_SEARCH_AGGREGATOR') or ViolationSearchAggregator()

    app.add_template_filter(format_violation_time, 'violation_time')
    app.add_template_filter(format_issue_date, 'issue_date')
    app.add_template_filter(borough_for_county_code, 'borough_name')

    app.register_blueprint(violations_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(plates_bp)
    app.register_blueprint(debug_bp)

    if app.config['CREATE_SCHEMA']:
        init_schema()

    @app.teardown_appcontext
    def remove_session(exception=None):
        init_database().session.remove()

    LOG.info('Application created')

    return app
