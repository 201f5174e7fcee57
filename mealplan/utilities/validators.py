"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from mealplan.utilities.constants import MIN_PEOPLE, MAX_PEOPLE


def _clean_keywords(values: List[str]) -> List[str]:
    """Strip keywords, drop blanks and keep the first occurrence of each."""
    cleaned: List[str] = []
    for v in values:
        if not isinstance(v, str):
            continue
        s = v.strip()
        if s and s not in cleaned:
            cleaned.append(s)
    return cleaned


class CredentialsInput(BaseModel):
    """Schema for register/login bodies."""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator('username')
    @classmethod
    def strip_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Username cannot be empty')
        return v


class PreferencesInput(BaseModel):
    """Schema for the preference-update body (camelCase, as sent by the client)."""
    dietaryRestrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    peopleCount: int = Field(..., ge=MIN_PEOPLE, le=MAX_PEOPLE)

    @field_validator('dietaryRestrictions', 'allergies')
    @classmethod
    def clean_keywords(cls, v):
        return _clean_keywords(v)


class ShoppingListItemInput(BaseModel):
    """Schema for one shopping list item."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: str = Field("", max_length=20)
    checked: bool = False


class ShoppingListInput(BaseModel):
    """Schema for a full shopping list replacement."""
    id: Optional[int] = None
    items: List[ShoppingListItemInput] = Field(default_factory=list)
