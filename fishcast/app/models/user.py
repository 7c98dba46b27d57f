# fishcast/app/models/user.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fishcast.app.db.session import Base
from fishcast.app.db.types import UtcDateTime

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True) # Stored lower-cased
    password_hash = Column(String(255), nullable=False) # bcrypt hash, never the raw password
    name = Column(String(255), nullable=False) # Display name shown on catch logs

    created_at = Column(UtcDateTime, server_default=func.now())

    # One angler has many catch logs
    catches = relationship("CatchLog", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', name='{self.name}')>"
