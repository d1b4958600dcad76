"""Module: gridcore.config.grid

Date: 2026-02-10

Grid defaults: row identity, pagination and progressive loading.
"""

# =====================================
# ROW IDENTITY
# =====================================

DEFAULT_INDEX_FIELD = "id"

# =====================================
# PAGINATION
# =====================================

DEFAULT_PAGE_SIZE = 10
DEFAULT_INITIAL_PAGE = 1
DEFAULT_PAGE_SIZE_OPTIONS = [10, 25, 50, 100]
DEFAULT_PAGINATION_BUTTON_COUNT = 5

# "rows" -> "Showing 1 to 10 of 42 rows", "pages" -> "1 of 5"
DEFAULT_PAGINATION_COUNTER = "rows"
PAGINATION_COUNTER_MODES = ("rows", "pages")

# =====================================
# PROGRESSIVE LOADING
# =====================================

# Page 1 is the initial data set; the first fetch asks for page 2
DEFAULT_PROGRESSIVE_CURSOR = 1
DEFAULT_PROGRESSIVE_SCROLL_MARGIN = 400  # pixels of unrendered content
