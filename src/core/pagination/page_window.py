"""
Sliding page-number window utilities.
"""

from core.utils.constants import PAGES_TO_SHOW


class PageWindow:
    """
    Page-number window helper.

    This class encapsulates all arithmetic behind the pagination control:
    which page numbers are shown as links and where the First, Prev, Next
    and Last controls point.

    The window is anchored half a window before the current page and never
    re-centers: near either boundary it shrinks instead.
    """

    @staticmethod
    def bounds(
        current_page: int,
        total_pages: int,
        pages_to_show: int = PAGES_TO_SHOW,
    ) -> tuple[int, int]:
        """
        Compute the first and last page numbers of the window.

        Args:
            current_page: Page currently displayed (1-based)
            total_pages: Number of pages reported by the users API
            pages_to_show: Maximum number of page links

        Returns:
            A tuple of (start, end). The window is empty when end < start.

        Example:
            bounds(current_page=10, total_pages=12)

            → (5, 12)
        """
        start = max(1, current_page - pages_to_show // 2)
        end = min(total_pages, start + pages_to_show - 1)

        return start, end

    @staticmethod
    def pages(
        current_page: int,
        total_pages: int,
        pages_to_show: int = PAGES_TO_SHOW,
    ) -> list[int]:
        """
        List the page numbers inside the window, in ascending order.

        Example:
            pages(current_page=3, total_pages=5)

            → [1, 2, 3, 4, 5]
        """
        start, end = PageWindow.bounds(current_page, total_pages, pages_to_show)
        return list(range(start, end + 1))

    @staticmethod
    def first_target() -> int:
        return 1

    @staticmethod
    def prev_target(current_page: int) -> int:
        return max(1, current_page - 1)

    @staticmethod
    def next_target(current_page: int, total_pages: int) -> int:
        # May point below 1 when total_pages is 0; callers guard non-positive targets.
        return min(total_pages, current_page + 1)

    @staticmethod
    def last_target(total_pages: int) -> int:
        return total_pages
