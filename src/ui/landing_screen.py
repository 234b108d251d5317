# src/ui/landing_screen.py

"""Marketing landing page and the sign-in dialog."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static

from src.services.auth_session import AuthSession
from src.services.remote_client import FetchError, RemoteDataClient
from src.ui.feed_screen import FeedScreen

logger = logging.getLogger("quicksell.ui")

FEATURES: list[tuple[str, str, str]] = [
    (
        "🛍️",
        "Easy Shopping",
        "Browse thousands of items from trusted sellers",
    ),
    (
        "💰",
        "Quick Selling",
        "List your items and start earning in minutes",
    ),
    (
        "🔒",
        "Secure Transactions",
        "Safe and secure platform for all your trades",
    ),
]


class SignInScreen(ModalScreen[bool]):
    """Email/password dialog. Dismisses with True once signed in."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, session: AuthSession) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        """Build the sign-in form."""
        yield Vertical(
            Label("Sign in to QuickSell", id="dialog_title"),
            Input(placeholder="Email", id="email_input"),
            Input(
                placeholder="Password",
                password=True,
                id="password_input",
            ),
            Horizontal(
                Button("Cancel", id="cancel_btn"),
                Button("Sign Up", id="sign_up_btn"),
                Button("Sign In", variant="primary", id="sign_in_btn"),
                id="dialog_buttons",
            ),
            id="sign_in_dialog",
        )

    def _credentials(self) -> tuple[str, str] | None:
        email = self.query_one("#email_input", Input).value.strip()
        password = self.query_one("#password_input", Input).value
        if not email or not password:
            self.notify(
                "Enter your email and password", severity="warning"
            )
            return None
        return email, password

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle dialog button clicks."""
        if event.button.id == "cancel_btn":
            self.action_cancel()
        elif event.button.id == "sign_in_btn":
            await self.sign_in()
        elif event.button.id == "sign_up_btn":
            await self.sign_up()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in either field signs in."""
        await self.sign_in()

    async def sign_in(self) -> None:
        """Sign in with the entered credentials."""
        credentials = self._credentials()
        if credentials is None:
            return
        try:
            await self.session.sign_in(*credentials)
        except FetchError as exc:
            logger.warning("Sign-in failed: %s", exc.message)
            self.notify(exc.message, title="Sign-in failed", severity="error")
            return
        self.dismiss(True)

    async def sign_up(self) -> None:
        """Create an account with the entered credentials."""
        credentials = self._credentials()
        if credentials is None:
            return
        try:
            user = await self.session.sign_up(*credentials)
        except FetchError as exc:
            logger.warning("Sign-up failed: %s", exc.message)
            self.notify(exc.message, title="Sign-up failed", severity="error")
            return
        if user is None:
            self.notify(
                "Check your email to confirm your account",
                title="Almost there",
            )
            return
        self.dismiss(True)

    def action_cancel(self) -> None:
        """Close without signing in."""
        self.dismiss(False)


class LandingScreen(Screen[None]):
    """Public marketing page shown to signed-out users."""

    def __init__(
        self,
        client: RemoteDataClient,
        session: AuthSession,
    ) -> None:
        super().__init__()
        self.client = client
        self.session = session

    def compose(self) -> ComposeResult:
        """Build the landing page."""
        yield Header()
        yield Container(
            Static("QuickSell", id="hero_title"),
            Static(
                "Your marketplace for everything. "
                "Buy and sell with ease.",
                id="hero_tagline",
            ),
            Horizontal(
                *(
                    Static(f"{icon}\n[b]{title}[/b]\n{blurb}", classes="feature")
                    for icon, title, blurb in FEATURES
                ),
                id="features",
            ),
            Horizontal(
                Button("Get Started", variant="primary", id="get_started_btn"),
                Button("Sign In", id="sign_in_btn"),
                id="cta",
            ),
            id="landing",
        )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Both calls to action open the sign-in dialog."""
        if event.button.id in ("get_started_btn", "sign_in_btn"):
            self.app.push_screen(
                SignInScreen(self.session), callback=self._signed_in
            )

    def _signed_in(self, signed_in: bool | None) -> None:
        if signed_in:
            self.open_feed()

    def open_feed(self) -> None:
        """Replace the landing page with the feed."""
        self.app.switch_screen(FeedScreen(self.client, self.session))
