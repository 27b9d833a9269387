import logging
from contextlib import contextmanager

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from . import db
from .exceptions import NotFoundError, QueryError, ValidationError
from .models import Result
from .responses import Lifter, LiftersResponse, LiftResult, PageInfo, ResultsSummary
from .util.conversion_util import Conversion
from .util.paging_util import PAGE_SIZE, Paging

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3


@contextmanager
def _query_errors(action: str):
    try:
        yield
    except (SQLAlchemyError, ValueError) as exc:
        # ValueError comes from a stored weight that is not a decimal
        logger.error("%s failed: %s", action, exc)
        db.session.rollback()
        raise QueryError(f"{action} failed") from exc


def resolve_names(name_fragment: str, page_token=None) -> LiftersResponse:
    """Find the distinct (lifter, hometown) identities matching a partial name.

    Spaces in ``name_fragment`` act as wildcards, so "j bradley" matches
    "Jessie Bradley". Matching is case-insensitive. Results come back 50 per
    page, sorted by name; ``page_token`` is the 1-based page and falls back
    to page 1 when it is missing or not a number.

    Raises:
        ValidationError: the fragment is shorter than three characters.
        QueryError: the database failed to run a query.
    """
    if name_fragment is None or len(name_fragment) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Search name must be at least {MIN_NAME_LENGTH} characters"
        )

    logger.info("name: %r, page: %r", name_fragment, page_token)
    pattern = Conversion.like_pattern(name_fragment)

    # the count decides how many rows the requested page can hold
    with _query_errors("lifter count query"):
        total = _count_identities(pattern)

    if total == 0:
        return LiftersResponse(lifters=[], name=name_fragment, total=0, current=0, pages=[])

    page = Paging.parse_page(page_token)
    capacity = Paging.page_capacity(total, page)

    lifters = []
    if capacity:
        with _query_errors("lifter page query"):
            rows = _fetch_identities(pattern, limit=capacity, offset=Paging.offset(page))
        lifters = [Lifter(name=lifter, hometown=hometown) for lifter, hometown in rows]

    return LiftersResponse(
        lifters=lifters,
        name=name_fragment,
        total=total,
        current=page,
        pages=[PageInfo(display=number) for number in Paging.page_range(total)],
    )


def _identities_query(pattern):
    return (
        db.session.query(Result.lifter, Result.hometown)
        .filter(Result.lifter.ilike(pattern))
        .group_by(Result.lifter, Result.hometown)
    )


def _count_identities(pattern) -> int:
    matches = _identities_query(pattern).subquery()
    return db.session.query(func.count()).select_from(matches).scalar() or 0


def _fetch_identities(pattern, limit=PAGE_SIZE, offset=0):
    return (
        _identities_query(pattern)
        # equal names keep the order they were stored in
        .order_by(Result.lifter.asc(), func.min(Result.rowid).asc())
        .limit(limit)
        .offset(offset)
        .all()
    )


def aggregate_results(name: str, hometown: str) -> ResultsSummary:
    """Summarize every result of one lifter, newest first.

    Raises:
        NotFoundError: nothing is stored for this lifter and hometown.
        QueryError: the database failed to run a query.
    """
    logger.info("name: %r, hometown: %r", name, hometown)

    with _query_errors("results query"):
        rows = (
            Result.query.filter(Result.lifter == name, Result.hometown == hometown)
            .order_by(Result.date.desc(), Result.rowid.asc())
            .all()
        )

    if not rows:
        raise NotFoundError(f"No results for {name} ({hometown})")

    with _query_errors("best lifts query"):
        best_total, best_sn, best_cj = (
            db.session.query(
                func.max(Result.total),
                func.max(Result.best_snatch),
                func.max(Result.best_cleanjerk),
            )
            .filter(Result.lifter == name, Result.hometown == hometown)
            .one()
        )

    results = [_annotate(row, best_total, best_sn, best_cj) for row in rows]

    total_sn_made = sum(result.snatches_made for result in results)
    total_cj_made = sum(result.clean_jerks_made for result in results)

    newest = results[0]
    first_name, last_name = Conversion.to_iwf_name(newest.lifter)

    return ResultsSummary(
        lifter=newest.lifter,
        hometown=newest.hometown,
        iwf_first_name=first_name,
        iwf_last_name=last_name,
        best_cj=best_cj,
        best_sn=best_sn,
        best_total=best_total,
        avg_cj_makes=Conversion.make_rate(total_cj_made, len(results)),
        avg_sn_makes=Conversion.make_rate(total_sn_made, len(results)),
        recent_weight=newest.competition_weight,
        results=results,
    )


def _matches(value, best) -> bool:
    return value is not None and best is not None and value == best


def _annotate(row: Result, best_total, best_sn, best_cj) -> LiftResult:
    return LiftResult(
        date=row.date,
        meet_name=row.meet_name,
        lifter=row.lifter,
        weight_class=row.weight_class,
        competition_weight=row.competition_weight,
        hometown=row.hometown,
        cj1=row.cj1,
        cj2=row.cj2,
        cj3=row.cj3,
        sn1=row.sn1,
        sn2=row.sn2,
        sn3=row.sn3,
        total=row.total,
        best_snatch=row.best_snatch,
        best_cleanjerk=row.best_cleanjerk,
        url=row.url,
        clean_jerks_made=Conversion.made_count(row.cj1, row.cj2, row.cj3),
        snatches_made=Conversion.made_count(row.sn1, row.sn2, row.sn3),
        best_result=(
            _matches(row.best_cleanjerk, best_cj)
            or _matches(row.best_snatch, best_sn)
            or _matches(row.total, best_total)
        ),
    )
