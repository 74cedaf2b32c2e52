"""HTML pagination control for the users page."""

from collections.abc import Callable
from html import escape

from core.pagination.page_window import PageWindow
from core.utils.constants import PAGES_TO_SHOW

PageChangeHandler = Callable[[int], str | None]


class PaginationControl:
    """Render First/Prev/page links/Next/Last for a page window.

    The control never builds URLs itself. For every target page it asks
    ``on_page_change`` for a link; ``None`` means the target must not be
    navigated to and the item is rendered disabled.
    """

    def __init__(
        self,
        *,
        current_page: int,
        total_pages: int,
        on_page_change: PageChangeHandler,
        pages_to_show: int = PAGES_TO_SHOW,
    ) -> None:
        self.current_page = current_page
        self.total_pages = total_pages
        self.on_page_change = on_page_change
        self.pages_to_show = pages_to_show

    def render(self) -> str:
        items = [
            self._item("«", PageWindow.first_target(), label="First"),
            self._item("‹", PageWindow.prev_target(self.current_page), label="Previous"),
        ]

        for page in PageWindow.pages(self.current_page, self.total_pages, self.pages_to_show):
            items.append(self._item(str(page), page, active=page == self.current_page))

        items.append(
            self._item("›", PageWindow.next_target(self.current_page, self.total_pages), label="Next")
        )
        items.append(self._item("»", PageWindow.last_target(self.total_pages), label="Last"))

        return '<ul class="pagination">' + "".join(items) + "</ul>"

    def _item(
        self,
        text: str,
        target: int,
        *,
        label: str | None = None,
        active: bool = False,
    ) -> str:
        classes = ["page-item"]
        if active:
            classes.append("active")

        href = self.on_page_change(target)
        aria = f' aria-label="{label}"' if label else ""

        if href is None:
            if not active:
                classes.append("disabled")
            inner = f'<span class="page-link"{aria}>{text}</span>'
        else:
            inner = (
                f'<a class="page-link" href="{escape(href)}" data-page="{target}"{aria}>'
                f"{text}</a>"
            )

        return f'<li class="{" ".join(classes)}">{inner}</li>'
