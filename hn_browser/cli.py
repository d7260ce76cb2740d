"""
Command-line interface for the HN Browser
"""

import click

from .app import FeedBrowser
from .config import BATCH_SIZE, CHUNK_SIZE, VISIBLE_ROWS, PAGE_SIZE
from .fetchers import HackerNewsAPI
from .models import BrowserConfig, Category, Status
from .ui import KEY_BINDINGS, draw, terminal_session
from .logging_config import setup_logging, get_logger

# Actions that block on the network; a notice is drawn before they run
_LOADING_NOTICES = {
    "cycle_category": "Loading stories...",
    "retry": "Loading stories...",
    "load_more": "Loading more stories...",
}


def run(browser: FeedBrowser) -> None:
    """Drive the browser from key presses until the user quits."""
    logger = get_logger(__name__)

    draw(browser, "Loading stories...")
    browser.activate(browser.config.category)

    while True:
        draw(browser)
        key = click.getchar()
        action = KEY_BINDINGS.get(key)

        # An empty read means stdin is closed
        if not key or action == "quit":
            logger.info("Quitting")
            return
        if action is None:
            continue

        if action == "open":
            if browser.status == Status.READY and browser.has_selected_url:
                logger.info(f"Opening {browser.selected_url}")
                click.launch(browser.selected_url)
            continue
        if action == "load_more" and not browser.can_load_more():
            continue

        notice = _LOADING_NOTICES.get(action)
        expected = Status.ERROR if action == "retry" else Status.READY
        if notice and browser.status == expected:
            draw(browser, notice)
        getattr(browser, action)()


@click.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in Category]),
    default=Category.TOP.value,
    help="Story category to open with (default: top)",
)
@click.option(
    "--batch-size",
    default=BATCH_SIZE,
    type=click.IntRange(1, 500),
    help=f"Stories to load per batch (default: {BATCH_SIZE})",
)
@click.option(
    "--chunk-size",
    default=CHUNK_SIZE,
    type=click.IntRange(1, 50),
    help=f"Maximum concurrent requests (default: {CHUNK_SIZE})",
)
@click.option(
    "--window-size",
    default=VISIBLE_ROWS,
    type=click.IntRange(1, 200),
    help=f"Visible rows in the story list (default: {VISIBLE_ROWS})",
)
@click.option(
    "--page-size",
    default=PAGE_SIZE,
    type=click.IntRange(1, 200),
    help=f"Rows moved by PageUp/PageDown (default: {PAGE_SIZE})",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set logging level (default: WARNING)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Write logs to this file (default: no logging)",
)
def main(category: str, batch_size: int, chunk_size: int, window_size: int, page_size: int, log_level: str, log_file: str):
    """Browse Hacker News stories in the terminal"""
    setup_logging(level=log_level, log_file=log_file, console=False)
    logger = get_logger(__name__)

    config = BrowserConfig(
        batch_size=batch_size,
        chunk_size=chunk_size,
        visible_rows=window_size,
        page_size=page_size,
        category=Category(category),
    )
    logger.info(f"Starting HN Browser - category: {category}, batch: {batch_size}, chunk: {chunk_size}")

    api = HackerNewsAPI(pool_size=chunk_size)
    try:
        with terminal_session():
            run(FeedBrowser(api=api, config=config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"HN Browser failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()
    finally:
        api.close()


if __name__ == "__main__":
    main()
