"""Page slicing for rendered listings."""

import math
from typing import List, Optional

DEFAULT_ITEMS_PER_PAGE = 20
PAGE_HINT = "可以使用 --page 或在 ## 之后加上页码以调整输出的条目页数。"


def page_count(total: int, items_per_page: int = DEFAULT_ITEMS_PER_PAGE) -> int:
    return math.ceil(total / items_per_page)


def paginate(
    title: str,
    lines: List[str],
    page: int = 1,
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
    suffix: Optional[str] = None,
) -> str:
    """Render a titled listing, sliced to one page when it is long.

    Short listings (at most ``items_per_page`` entries) are returned whole
    under a ``"{title}："`` header. Longer ones are cut to the 1-based
    ``page`` and get a ``（第 page/count 页）`` header plus a navigation hint.

    ``page`` is not clamped: a page past the end renders a header with an
    empty body.

    Args:
        title: Listing title
        lines: Rendered entries
        page: 1-based page number
        items_per_page: Page size
        suffix: Optional trailing line (skipped when empty)

    Returns:
        Joined text block
    """
    if len(lines) <= items_per_page:
        output = [f"{title}：", *lines]
        if suffix:
            output.append(suffix)
        return "\n".join(output)

    start = (page - 1) * items_per_page
    output = [
        f"{title}（第 {page}/{page_count(len(lines), items_per_page)} 页）：",
        *lines[start:start + items_per_page],
    ]
    if suffix:
        output.append(suffix)
    output.append(PAGE_HINT)
    return "\n".join(output)
