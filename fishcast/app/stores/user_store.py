# fishcast/app/stores/user_store.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from fishcast.app.models.user import User


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email.lower())).first()

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Inserts a user; raises IntegrityError when the email is taken."""
        user = User(email=email.lower(), password_hash=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
