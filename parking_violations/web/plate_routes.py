import logging

from flask import Blueprint, current_app, g, jsonify, request

from parking_violations.constants import L10N
from parking_violations.services.constants.exceptions import \
    PlateNotFoundException, PlateWatchException, ValidationException
from parking_violations.web.auth import login_required

LOG = logging.getLogger(__name__)

plates_bp = Blueprint('plates', __name__, url_prefix='/api/user/plates')


@plates_bp.route('', methods=['GET'])
@login_required
def list_plates():
    plates = current_app.extensions['plate_watch_service'].list_plates(g.user.id)

    return jsonify({'plates': [plate.to_dict() for plate in plates]})


@plates_bp.route('', methods=['POST'])
@login_required
def add_plate():
    payload = request.get_json(silent=True) or {}

    try:
        plate = current_app.extensions['plate_watch_service'].add_plate(
            user_id=g.user.id,
            plate_number=payload.get('plateNumber'),
            state=payload.get('state'),
            borough=payload.get('borough'),
            nickname=payload.get('nickname'))
    except (PlateWatchException, ValidationException) as exc:
        return jsonify({'error': str(exc)}), 400

    return jsonify({'plate': plate.to_dict(),
                    'message': L10N.PLATE_ADDED_STRING})


@plates_bp.route('/<int:plate_id>', methods=['DELETE'])
@login_required
def remove_plate(plate_id: int):
    try:
        current_app.extensions['plate_watch_service'].remove_plate(
            user_id=g.user.id, plate_id=plate_id)
    except PlateNotFoundException as exc:
        return jsonify({'error': str(exc)}), 404

    return jsonify({'message': L10N.PLATE_REMOVED_STRING})


@plates_bp.route('/<int:plate_id>', methods=['PATCH'])
@login_required
def update_plate(plate_id: int):
    payload = request.get_json(silent=True) or {}
    is_active = bool(payload.get('isActive'))

    try:
        plate = current_app.extensions['plate_watch_service'].set_active(
            user_id=g.user.id, plate_id=plate_id, is_active=is_active)
    except PlateNotFoundException as exc:
        return jsonify({'error': str(exc)}), 404

    return jsonify({
        'plate': plate.to_dict(),
        'message': L10N.PLATE_UPDATED_STRING.format(
            'activated' if is_active else 'paused')})
