from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, \
    String, UniqueConstraint
from sqlalchemy.orm import relationship

from parking_violations.models.base import Base
from parking_violations.models.user import User


class PlateWatch(Base):
    """ Represents a plate a user has asked to monitor """

    __tablename__ = 'plate_watches'

    # columns
    id = Column(Integer, primary_key=True)
    borough = Column(String(32))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    nickname = Column(String(255))
    plate_number = Column(String(16), nullable=False)
    state = Column(String(8), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow,
                        onupdate=datetime.utcnow, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'),
                     nullable=False)

    # associations
    user = relationship(User)

    # indices
    __table_args__ = (
        UniqueConstraint('user_id', 'plate_number', 'state',
                         name='unique_user_plate_state'),
        Index('index_plate_watches_user_id', 'user_id'),
        Index('index_plate_watches_plate_state', 'plate_number', 'state'),
    )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'plateNumber': self.plate_number,
            'state': self.state,
            'borough': self.borough,
            'nickname': self.nickname,
            'isActive': self.is_active,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }
