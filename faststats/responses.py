from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Lifter:
    name: str
    hometown: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PageInfo:
    display: int

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class LiftersResponse:
    """One page of lifter identities matching a name search."""

    lifters: list[Lifter]
    name: str
    total: int
    current: int
    pages: list[PageInfo] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def to_dict(self):
        return {
            "lifters": [lifter.to_dict() for lifter in self.lifters],
            "name": self.name,
            "total": self.total,
            "current": self.current,
            "pages": [page.to_dict() for page in self.pages],
            "total_pages": self.total_pages,
        }


@dataclass(frozen=True)
class LiftResult:
    """A stored result row plus the per-row statistics derived from it."""

    date: str
    meet_name: str
    lifter: str
    weight_class: str
    competition_weight: Optional[Decimal]
    hometown: str
    cj1: Optional[Decimal]
    cj2: Optional[Decimal]
    cj3: Optional[Decimal]
    sn1: Optional[Decimal]
    sn2: Optional[Decimal]
    sn3: Optional[Decimal]
    total: Optional[Decimal]
    best_snatch: Optional[Decimal]
    best_cleanjerk: Optional[Decimal]
    url: str
    clean_jerks_made: int
    snatches_made: int
    best_result: bool = False

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ResultsSummary:
    lifter: str
    hometown: str
    iwf_first_name: str
    iwf_last_name: str
    best_cj: Optional[Decimal]
    best_sn: Optional[Decimal]
    best_total: Optional[Decimal]
    avg_cj_makes: Decimal
    avg_sn_makes: Decimal
    recent_weight: Optional[Decimal]
    results: list[LiftResult]

    def to_dict(self):
        data = asdict(self)
        data["results"] = [result.to_dict() for result in self.results]
        return data
