"""
SQLAlchemy ORM Models
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class User(Base):
    __tablename__ = 'users'

    user_id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    timestamp = Column(String, nullable=False)  # ISO-8601 UTC, same as the JSON file

    def to_record(self):
        return {
            'email': self.email,
            'password_hash': self.password_hash,
            'timestamp': self.timestamp
        }
