# src/ui/app.py

"""Terminal UI for the QuickSell marketplace."""

import logging

from textual.app import App
from textual.binding import Binding

from src.config.settings import Settings
from src.services.auth_session import AuthSession
from src.services.remote_client import RemoteDataClient
from src.ui.feed_screen import FeedScreen
from src.ui.landing_screen import LandingScreen

logger = logging.getLogger("quicksell.ui")


class QuickSellApp(App[object]):
    """Terminal UI for the QuickSell marketplace.

    Two routes: the landing page for signed-out users and the feed for
    signed-in ones.  The client and session are created here (or passed
    in) and handed to every screen explicitly.
    """

    CSS_PATH = "styles.css"
    TITLE = Settings.APP_NAME

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        client: RemoteDataClient | None = None,
        session: AuthSession | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.client = client or RemoteDataClient()
        self.session = session or AuthSession(self.client)

    def on_mount(self) -> None:
        """Show the feed to signed-in users, the landing page otherwise."""
        if self.session.current_user() is not None:
            logger.info("Session present, opening feed")
            self.push_screen(FeedScreen(self.client, self.session))
        else:
            self.push_screen(LandingScreen(self.client, self.session))

    async def on_unmount(self) -> None:
        """Release the HTTP session."""
        await self.client.close()
