import logging

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from parking_violations.constants import L10N
from parking_violations.models.plate_watch import PlateWatch
from parking_violations.services.constants.exceptions import \
    PlateNotFoundException, PlateWatchException, ValidationException

LOG = logging.getLogger(__name__)


class PlateWatchService:

    def list_plates(self, user_id: int) -> List[PlateWatch]:
        return PlateWatch.query.filter_by(user_id=user_id).order_by(
            PlateWatch.created_at.desc(), PlateWatch.id.desc()).all()

    def add_plate(self,
                  user_id: int,
                  plate_number: str,
                  state: str,
                  borough: Optional[str] = None,
                  nickname: Optional[str] = None) -> PlateWatch:
        if not plate_number or not state:
            raise ValidationException(L10N.MISSING_PLATE_FIELDS_STRING)

        plate_number = plate_number.strip().upper()
        state = state.strip().upper()

        if PlateWatch.get_by(user_id=user_id, plate_number=plate_number,
                             state=state):
            raise PlateWatchException(L10N.DUPLICATE_PLATE_STRING)

        plate_watch = PlateWatch(
            borough=borough or None,
            nickname=nickname or None,
            plate_number=plate_number,
            state=state,
            user_id=user_id)

        session = PlateWatch.query.session
        session.add(plate_watch)

        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise PlateWatchException(L10N.DUPLICATE_PLATE_STRING) from exc

        LOG.info(f'User {user_id} is watching {state}:{plate_number}')

        return plate_watch

    def remove_plate(self, user_id: int, plate_id: int) -> None:
        plate_watch: PlateWatch = self._find_own_plate(user_id, plate_id)

        session = PlateWatch.query.session
        session.delete(plate_watch)
        session.commit()

        LOG.info(f'User {user_id} removed plate watch {plate_id}')

    def set_active(self, user_id: int, plate_id: int,
                   is_active: bool) -> PlateWatch:
        plate_watch: PlateWatch = self._find_own_plate(user_id, plate_id)

        plate_watch.is_active = bool(is_active)
        PlateWatch.query.session.commit()

        return plate_watch

    def _find_own_plate(self, user_id: int, plate_id: int) -> PlateWatch:
        plate_watch: Optional[PlateWatch] = PlateWatch.get_by(
            id=plate_id, user_id=user_id)

        if plate_watch is None:
            raise PlateNotFoundException(L10N.PLATE_NOT_FOUND_STRING)

        return plate_watch
