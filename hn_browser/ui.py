"""
Terminal rendering for the HN Browser.

Everything here reads FeedBrowser state and returns text; nothing mutates it.
"""

import sys
from contextlib import contextmanager
from typing import List, Optional

import click
from bs4 import BeautifulSoup
from prettytable import PrettyTable

from .app import FeedBrowser
from .config import MAX_TITLE_WIDTH
from .models import Item, Status

HELP_TEXT = "[j/k] scroll [Space] category [d] details [o] open [m] more [r] retry [q] quit"

# Alternate screen buffer and cursor visibility
_ENTER_SCREEN = "\x1b[?1049h\x1b[?25l"
_LEAVE_SCREEN = "\x1b[?25h\x1b[?1049l"

KEY_BINDINGS = {
    "j": "select_next",
    "\x1b[B": "select_next",
    "k": "select_previous",
    "\x1b[A": "select_previous",
    "\x1b[6~": "page_forward",
    "\x1b[5~": "page_backward",
    "g": "jump_to_start",
    "\x1b[H": "jump_to_start",
    "\x1bOH": "jump_to_start",
    "G": "jump_to_end",
    "\x1b[F": "jump_to_end",
    "\x1bOF": "jump_to_end",
    " ": "cycle_category",
    "d": "toggle_details",
    "m": "load_more",
    "r": "retry",
    "o": "open",
    "q": "quit",
}


@contextmanager
def terminal_session():
    """Switch to the alternate screen for the duration of the block."""
    interactive = sys.stdout.isatty()
    if interactive:
        click.echo(_ENTER_SCREEN, nl=False)
    try:
        yield
    finally:
        if interactive:
            click.echo(_LEAVE_SCREEN, nl=False)


def strip_html(text: Optional[str]) -> str:
    """Convert HN comment markup to plain text, one paragraph per line."""
    if not text:
        return ""
    soup = BeautifulSoup(text, "html.parser")
    return soup.get_text("\n").strip()


def _truncate(text: str, width: int) -> str:
    if len(text) > width:
        return text[:width - 3] + "..."
    return text


def render_header(browser: FeedBrowser) -> str:
    title = click.style(f"Hacker News - {browser.category_label} Stories", fg="yellow", bold=True)
    return f"{title}  {click.style(HELP_TEXT, dim=True)}"


def render_story_list(browser: FeedBrowser, now: Optional[float] = None) -> str:
    if not browser.loaded_count:
        return "No stories found."

    table = PrettyTable(["", "#", "Title", "Score", "Age", "Comments", "Domain"])
    table.align["Title"] = "l"
    table.align["Domain"] = "l"
    table.align["Score"] = "r"
    table.align["Comments"] = "r"

    for index, item in browser.visible_items():
        if index == browser.selected_index:
            marker = ">"
        elif item.has_link:
            marker = "*"
        else:
            marker = ""
        table.add_row([
            marker,
            index + 1,
            _truncate(item.title or "", MAX_TITLE_WIDTH),
            item.score,
            item.time_ago(now),
            item.descendants or 0,
            item.domain,
        ])
    return table.get_string()


def render_details(item: Item, now: Optional[float] = None) -> str:
    lines: List[str] = [click.style(item.title or "(untitled)", bold=True), ""]
    if item.url:
        lines.append(f"URL:    {item.url}")
    lines.append(f"Domain: {item.domain}")
    lines.append(f"Type:   {item.type or 'story'}")
    lines.append(item.summary_line(now))

    body = strip_html(item.text)
    if body:
        lines.extend(["", body])
    return "\n".join(lines)


def render_status_bar(browser: FeedBrowser) -> str:
    status = browser.status
    if status == Status.LOADING:
        return "Loading... | [q] quit"
    if status == Status.ERROR:
        return "Error loading stories | [r] retry [q] quit"

    parts = [f"{browser.position}/{browser.loaded_count} loaded", f"{browser.total_count} total"]
    if status == Status.LOADING_MORE:
        parts.append("Loading more stories...")
        return " | ".join(parts)

    parts.append("[o] open link" if browser.has_selected_url else "[no link]")
    parts.append("[m] load more" if browser.can_load_more() else "[all loaded]")
    return " | ".join(parts)


def render_body(browser: FeedBrowser, now: Optional[float] = None) -> str:
    status = browser.status
    if status == Status.LOADING:
        return "Loading stories..."
    if status == Status.LOADING_MORE:
        return "Loading more stories..."
    if status == Status.ERROR:
        message = click.style(f"Error: {browser.error_message}", fg="red")
        return f"{message}\nPress r to retry or q to quit."

    if browser.show_details and browser.selected_item is not None:
        return render_details(browser.selected_item, now)
    return render_story_list(browser, now)


def render_screen(browser: FeedBrowser, now: Optional[float] = None) -> str:
    """Render the whole screen for the current state."""
    return "\n\n".join([
        render_header(browser),
        render_body(browser, now),
        render_status_bar(browser),
    ])


def draw(browser: FeedBrowser, notice: Optional[str] = None) -> None:
    click.clear()
    if notice:
        click.echo(f"{render_header(browser)}\n\n{notice}")
    else:
        click.echo(render_screen(browser))
