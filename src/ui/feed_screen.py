# src/ui/feed_screen.py

"""Marketplace feed: search, product tiles, sell and sign-out actions."""

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.notifications import SeverityLevel
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Static,
)

from src.models.feed_state import FeedState
from src.services.auth_session import AuthSession
from src.services.feed_loader import FeedLoader
from src.services.listing_form import ListingForm
from src.services.remote_client import FetchError, RemoteDataClient
from src.ui.add_product_modal import AddProductModal
from src.ui.product_card import ProductCard

logger = logging.getLogger("quicksell.ui")


class FeedScreen(Screen[None]):
    """The signed-in marketplace page."""

    BINDINGS = [
        Binding("n", "sell", "Sell Item"),
        Binding("r", "refresh", "Refresh"),
        Binding("o", "sign_out", "Sign Out"),
    ]

    def __init__(
        self,
        client: RemoteDataClient,
        session: AuthSession,
    ) -> None:
        super().__init__()
        self.client = client
        self.session = session
        self.loader = FeedLoader(client)
        self.feed_state = FeedState()
        self.form = ListingForm(
            client,
            session,
            notify=self._notify,
            on_product_added=self._reload,
        )

    def _notify(
        self,
        message: str,
        *,
        title: str = "",
        severity: SeverityLevel = "information",
    ) -> None:
        self.app.notify(message, title=title, severity=severity)

    def compose(self) -> ComposeResult:
        """Build the widget tree for the feed page."""
        user = self.session.current_user()
        welcome = f"Welcome back, {user.email}" if user else ""

        yield Header()
        yield Horizontal(
            Static("QuickSell", id="brand"),
            Static(welcome, id="welcome"),
            Button("+ Sell Item", variant="primary", id="sell_btn"),
            Button("Sign Out", id="sign_out_btn"),
            id="feed_header",
        )
        yield LoadingIndicator(id="loader")
        yield Container(
            Input(placeholder="Search products...", id="search_input"),
            Static("Marketplace", id="feed_title"),
            Static("", id="summary"),
            Static("", id="empty_state"),
            VerticalScroll(id="product_grid"),
            id="feed_body",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Load the feed once the page is shown."""
        self._reload()

    def _reload(self) -> None:
        self.run_worker(
            self.load_products(), exclusive=True, group="feed"
        )

    def _show_loading(self, loading: bool) -> None:
        """While loading, the indicator is the only thing on the page."""
        self.query_one("#loader", LoadingIndicator).display = loading
        self.query_one("#feed_header", Horizontal).display = not loading
        self.query_one("#feed_body", Container).display = not loading

    async def load_products(self) -> None:
        """Fetch the feed and re-render it."""
        self.feed_state.loading = True
        self._show_loading(True)
        try:
            products = await self.loader.load()
        except FetchError as exc:
            logger.error("Feed load failed: %s", exc.message)
            self.feed_state.load_failed(exc.message)
            self.app.notify(
                exc.message,
                title="Error fetching products",
                severity="error",
            )
        else:
            self.feed_state.load_succeeded(products)

        if not self.is_mounted:
            logger.debug("Feed screen gone, discarding load result")
            return
        self._show_loading(False)
        await self.render_feed()

    async def render_feed(self) -> None:
        """Rebuild the tiles from the current displayed sequence."""
        displayed = self.feed_state.displayed
        self.query_one("#summary", Static).update(self.feed_state.summary)

        empty = self.feed_state.empty_message()
        empty_state = self.query_one("#empty_state", Static)
        if empty is None:
            empty_state.display = False
        else:
            heading, hint = empty
            empty_state.update(
                Text.assemble("🛒 ", (heading, "bold"), "\n", hint)
            )
            empty_state.display = True

        grid = self.query_one("#product_grid", VerticalScroll)
        await grid.remove_children()
        if displayed:
            await grid.mount_all(ProductCard(item) for item in displayed)

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Re-derive the displayed feed as the query is typed."""
        if event.input.id != "search_input":
            return
        self.feed_state.query = event.value
        if self.feed_state.loading:
            return
        await self.render_feed()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle header button clicks."""
        if event.button.id == "sell_btn":
            self.action_sell()
        elif event.button.id == "sign_out_btn":
            await self.action_sign_out()

    def action_sell(self) -> None:
        """Open the listing form."""
        if self.feed_state.loading:
            return
        self.app.push_screen(AddProductModal(self.form))

    def action_refresh(self) -> None:
        """Re-run the feed load."""
        self._reload()

    async def action_sign_out(self) -> None:
        """Sign out and return to the landing page."""
        await self.session.sign_out()
        from src.ui.landing_screen import LandingScreen

        self.app.switch_screen(LandingScreen(self.client, self.session))
