"""
In-memory filtering and sorting for the public job board.

The API hands out the full posting list; callers narrow and order it locally
with a FilterState. Works on JobResponse objects or anything exposing the same
attributes (title, location, type, category, preferred_gender, salary, deadline).
"""
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Sequence

# Leading number, with optional thousands separators ("€2,500" -> 2500).
_SALARY_NUMBER = re.compile(r"\d{1,3}(?:[,.]\d{3})+(?!\d)|\d+")


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    SALARY_HIGH = "salary-high"
    SALARY_LOW = "salary-low"


class SalaryBucket(str, Enum):
    ALL = "all"
    UP_TO_1000 = "0-1000"
    FROM_1000_TO_2000 = "1000-2000"
    FROM_2000_TO_3000 = "2000-3000"
    ABOVE_3000 = "3000+"

    def contains(self, amount: int) -> bool:
        if self is SalaryBucket.UP_TO_1000:
            return amount <= 1000
        if self is SalaryBucket.FROM_1000_TO_2000:
            return 1000 < amount <= 2000
        if self is SalaryBucket.FROM_2000_TO_3000:
            return 2000 < amount <= 3000
        if self is SalaryBucket.ABOVE_3000:
            return amount > 3000
        return True


@dataclass(frozen=True)
class FilterState:
    search: str = ""
    types: frozenset[str] = field(default_factory=frozenset)
    categories: frozenset[str] = field(default_factory=frozenset)
    preferred_genders: frozenset[str] = field(default_factory=frozenset)
    salary_range: SalaryBucket = SalaryBucket.ALL
    sort_by: SortKey = SortKey.NEWEST

    def __post_init__(self):
        # Accept plain lists/strings from callers; keep the state hashable.
        object.__setattr__(self, "search", self.search or "")
        object.__setattr__(self, "types", frozenset(self.types or ()))
        object.__setattr__(self, "categories", frozenset(self.categories or ()))
        object.__setattr__(self, "preferred_genders", frozenset(self.preferred_genders or ()))
        object.__setattr__(self, "salary_range", SalaryBucket(self.salary_range))
        object.__setattr__(self, "sort_by", SortKey(self.sort_by))


def extract_salary(text: str | None) -> int:
    """Reduce a free-text salary to its leading whole number; no digits means 0."""
    if not text:
        return 0
    match = _SALARY_NUMBER.search(text)
    if not match:
        return 0
    return int(re.sub(r"\D", "", match.group()))


def parse_deadline(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def matches(job: Any, state: FilterState) -> bool:
    if state.search:
        needle = state.search.lower()
        if needle not in job.title.lower() and needle not in job.location.lower():
            return False
    if state.types and job.type not in state.types:
        return False
    if state.categories and job.category not in state.categories:
        return False
    if state.preferred_genders and job.preferred_gender not in state.preferred_genders:
        return False
    return state.salary_range.contains(extract_salary(job.salary))


def sort_jobs(jobs: Iterable[Any], sort_by: SortKey) -> list:
    jobs = list(jobs)
    sort_by = SortKey(sort_by)
    if sort_by is SortKey.SALARY_HIGH:
        return sorted(jobs, key=lambda j: extract_salary(j.salary), reverse=True)
    if sort_by is SortKey.SALARY_LOW:
        return sorted(jobs, key=lambda j: extract_salary(j.salary))

    # Postings with an unreadable deadline go last in either direction.
    def deadline_key(job):
        deadline = parse_deadline(job.deadline)
        if deadline is None:
            return (sort_by is SortKey.OLDEST, 0)
        return (sort_by is SortKey.NEWEST, deadline.toordinal())

    return sorted(jobs, key=deadline_key, reverse=sort_by is SortKey.NEWEST)


def apply_filters(jobs: Iterable[Any], state: FilterState) -> list:
    return sort_jobs((job for job in jobs if matches(job, state)), state.sort_by)


def filter_options(jobs: Iterable[Any]) -> dict[str, list[str]]:
    """Distinct types and categories, in first-seen order, for building filter controls."""
    types: dict[str, None] = {}
    categories: dict[str, None] = {}
    for job in jobs:
        types.setdefault(job.type, None)
        categories.setdefault(job.category, None)
    return {"types": list(types), "categories": list(categories)}


class JobQueryEngine:
    """Memoizes apply_filters on (job list identity, filter state)."""

    max_cached_states = 64

    def __init__(self):
        self._jobs: Sequence[Any] | None = None
        self._results: dict[FilterState, list] = {}

    def run(self, jobs: Sequence[Any], state: FilterState) -> list:
        if jobs is not self._jobs:
            self._jobs = jobs
            self._results = {}
        result = self._results.get(state)
        if result is None:
            if len(self._results) >= self.max_cached_states:
                self._results.clear()
            result = apply_filters(jobs, state)
            self._results[state] = result
        return list(result)
