# main.py

"""Entry point for the QuickSell terminal marketplace."""

import logging

from src.config.logging_config import setup_logging

logger = logging.getLogger("quicksell.main")


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import QuickSellApp

    try:
        app = QuickSellApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("QuickSell TUI shutting down")


def main() -> None:
    """Set up logging and start the marketplace UI."""
    log_file = setup_logging()
    logger.info("QuickSell starting, log file: %s", log_file)
    _run_tui()


if __name__ == "__main__":
    main()
