"""User and session persistence over the JSON store."""
from datetime import datetime
from typing import Optional

from mealplan.domain.Preferences import Preferences
from mealplan.domain.User import User
from mealplan.infra.Json_Store import JsonStore


class UserRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    # --- Users -------------------------------------------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        row = next((u for u in self.store.read()["users"] if u["id"] == user_id), None)
        return User.from_dict(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        row = next((u for u in self.store.read()["users"] if u["username"] == username), None)
        return User.from_dict(row) if row else None

    def create_user(self, username: str, password_hash: str) -> User:
        with self.store.transaction() as doc:
            user = User(id=JsonStore.next_id(doc, "users"), username=username, password_hash=password_hash)
            doc["users"].append(user.to_dict())
        return user

    def update_user_preferences(self, user_id: int, preferences: Preferences) -> Optional[User]:
        with self.store.transaction() as doc:
            row = next((u for u in doc["users"] if u["id"] == user_id), None)
            if row is None:
                return None
            row["preferences"] = preferences.to_dict()
            return User.from_dict(row)

    # --- Sessions ----------------------------------------------------------
    def create_session(self, token: str, user_id: int, expires_at: datetime):
        with self.store.transaction() as doc:
            doc["sessions"].append({
                "token": token,
                "userId": user_id,
                "expiresAt": expires_at.isoformat(),
            })

    def get_session(self, token: str) -> Optional[dict]:
        return next((s for s in self.store.read()["sessions"] if s["token"] == token), None)

    def delete_session(self, token: str) -> bool:
        with self.store.transaction() as doc:
            before = len(doc["sessions"])
            doc["sessions"] = [s for s in doc["sessions"] if s["token"] != token]
            return len(doc["sessions"]) != before

    def purge_expired_sessions(self, now: datetime) -> int:
        with self.store.transaction() as doc:
            kept = [s for s in doc["sessions"] if datetime.fromisoformat(s["expiresAt"]) > now]
            removed = len(doc["sessions"]) - len(kept)
            doc["sessions"] = kept
            return removed
