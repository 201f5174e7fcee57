"""User domain entity: unique username, password hash, optional preferences."""
from typing import Optional

from mealplan.domain.Preferences import Preferences
from mealplan.utilities.constants import DEFAULT_PEOPLE_COUNT


class User:
    def __init__(self, id: int = 0, username: str = "", password_hash: str = "",
                 preferences: Optional[Preferences] = None):
        self.id = id
        self.username = username
        self.password_hash = password_hash
        self.preferences = preferences

    @property
    def people_count(self) -> int:
        if self.preferences is None:
            return DEFAULT_PEOPLE_COUNT
        return self.preferences.people_count

    def __str__(self) -> str:
        return f"User {self.id} - {self.username}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return User(
            id=d.get('id', 0),
            username=d.get('username', ''),
            password_hash=d.get('password', ''),
            preferences=Preferences.from_dict(d.get('preferences')),
        )

    def to_dict(self):
        '''Full record for persistence (includes the password hash).'''
        return {
            "id": self.id,
            "username": self.username,
            "password": self.password_hash,
            "preferences": self.preferences.to_dict() if self.preferences else None,
        }

    def to_public_dict(self):
        '''Record safe to return to a client.'''
        return {
            "id": self.id,
            "username": self.username,
            "preferences": self.preferences.to_dict() if self.preferences else None,
        }
