from typing import Final

PDF_DATE_FORMAT: Final[str] = "%d.%m.%Y"
MAX_PLAN_DAYS: Final[int] = 7
MIN_PEOPLE: Final[int] = 1
MAX_PEOPLE: Final[int] = 10
DEFAULT_PEOPLE_COUNT: Final[int] = 1
REGENERATE_POLICIES: Final[tuple[str, ...]] = ("replace", "append")
DAY_NAMES: Final[list[str]] = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]
