from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, String

from parking_violations.models.base import Base


class User(Base):
    """ Represents a registered account """

    __tablename__ = 'users'

    # columns
    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(255))
    last_name = Column(String(255))
    name = Column(String(255))
    password_hash = Column(String(255), nullable=False)

    # indices
    __table_args__ = (
        Index('index_users_created_at', 'created_at'),
    )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'firstName': self.first_name,
            'lastName': self.last_name,
        }
