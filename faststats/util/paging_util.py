from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

PAGE_SIZE = 50


class Paging:
    """Page arithmetic for the lifter search. Pages are 1-based for humans,
    offsets are 0-based for the database."""

    page_pattern = re.compile(r"-?[0-9]+")

    @staticmethod
    def parse_page(token) -> int:
        if token is None or token == "":
            return 1
        if not Paging.page_pattern.fullmatch(str(token)):
            logger.warning("failed to parse page %r, using page 1", token)
            return 1
        page = int(str(token))
        return max(page, 1)

    @staticmethod
    def total_pages(total: int, page_size: int = PAGE_SIZE) -> int:
        if total <= 0:
            return 0
        return -(-total // page_size)

    @staticmethod
    def page_capacity(total: int, page: int, page_size: int = PAGE_SIZE) -> int:
        """Number of entries expected on ``page`` for ``total`` matches.

        200 total, page 2 -> 50
        198 total, page 4 -> 48
        200 total, page 4 -> 50 (exact multiple)
        """
        num_pages = Paging.total_pages(total, page_size)
        if page < 1 or page > num_pages:
            return 0
        if page < num_pages:
            return page_size
        remainder = total - (num_pages - 1) * page_size
        return remainder if remainder else page_size

    @staticmethod
    def offset(page: int, page_size: int = PAGE_SIZE) -> int:
        return (max(page, 1) - 1) * page_size

    @staticmethod
    def page_range(total: int, page_size: int = PAGE_SIZE) -> list[int]:
        return list(range(1, Paging.total_pages(total, page_size) + 1))
