"""
Configuration constants and settings for HN Browser.
"""

# Hacker News API settings
HN_API_BASE_URL = "https://hacker-news.firebaseio.com/v0"
HN_ITEM_ENDPOINT = "/item/{}.json"
HN_CATEGORY_ENDPOINTS = {
    "top": "/topstories.json",
    "new": "/newstories.json",
    "best": "/beststories.json",
    "show": "/showstories.json",
    "ask": "/askstories.json",
}

# Shown in place of a domain when a story has no external link
HN_DOMAIN = "news.ycombinator.com"

# HTTP settings
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)
REQUEST_TIMEOUT = 10

# Pagination settings
BATCH_SIZE = 30
CHUNK_SIZE = 10

# Display settings
VISIBLE_ROWS = 20
PAGE_SIZE = 10
MAX_TITLE_WIDTH = 70
