# tests/test_listing_form.py

"""Tests for the ListingForm submit cycle."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from src.models.listing_draft import ListingDraft
from src.models.product import Condition
from src.models.user import SessionUser
from src.services.listing_form import FormState, ListingForm
from src.services.remote_client import FetchError


def _form(
    user: SessionUser | None = SessionUser(id="user-1", email="a@b.test"),
) -> tuple[ListingForm, MagicMock, MagicMock, MagicMock]:
    client = MagicMock()
    client.insert_product = AsyncMock(return_value=None)
    session = MagicMock()
    session.current_user.return_value = user
    notify = MagicMock()
    on_added = MagicMock()
    form = ListingForm(client, session, notify, on_product_added=on_added)
    return form, client, notify, on_added


def _fill(form: ListingForm) -> None:
    form.update("title", "Desk Lamp")
    form.update("description", "Barely used")
    form.update("price", "15.50")


class TestListingFormSubmit(unittest.IsolatedAsyncioTestCase):
    """Submit success and failure paths."""

    async def test_success_inserts_parsed_row(self) -> None:
        """Price is parsed and the row is tagged with the session user."""
        form, client, _notify, _added = _form()
        _fill(form)

        ok = await form.submit()

        self.assertTrue(ok)
        client.insert_product.assert_awaited_once_with(
            {
                "title": "Desk Lamp",
                "description": "Barely used",
                "price": 15.5,
                "image_url": None,
                "category": None,
                "condition": "new",
            },
            "user-1",
        )

    async def test_success_resets_and_fires_callback_once(self) -> None:
        """Fields return to defaults and the caller is told once."""
        form, _client, notify, on_added = _form()
        _fill(form)

        await form.submit()

        self.assertEqual(form.draft, ListingDraft())
        on_added.assert_called_once_with()
        notify.assert_called_once()
        self.assertEqual(notify.call_args.kwargs["title"], "Success!")
        self.assertEqual(form.state, FormState.IDLE)

    async def test_failure_keeps_fields(self) -> None:
        """A failed insert leaves every value in place."""
        form, client, notify, on_added = _form()
        client.insert_product.side_effect = FetchError(
            "new row violates row-level security policy"
        )
        _fill(form)
        form.update("category", "Home")

        ok = await form.submit()

        self.assertFalse(ok)
        self.assertEqual(form.draft.title, "Desk Lamp")
        self.assertEqual(form.draft.category, "Home")
        self.assertEqual(form.state, FormState.IDLE)
        on_added.assert_not_called()
        notify.assert_called_once_with(
            "new row violates row-level security policy",
            title="Error",
            severity="error",
        )

    async def test_invalid_price_never_submits(self) -> None:
        """A malformed price disables submit and skips the insert."""
        form, client, notify, _added = _form()
        _fill(form)
        form.update("price", "fifteen")

        self.assertFalse(form.can_submit)
        self.assertFalse(await form.submit())
        client.insert_product.assert_not_awaited()
        self.assertEqual(notify.call_args.kwargs["severity"], "error")

    async def test_signed_out_never_submits(self) -> None:
        """Without a user nothing is inserted."""
        form, client, _notify, _added = _form(user=None)
        _fill(form)
        self.assertFalse(await form.submit())
        client.insert_product.assert_not_awaited()

    async def test_optional_fields_and_condition(self) -> None:
        """Category, image URL and condition are sent when given."""
        form, client, _notify, _added = _form()
        _fill(form)
        form.update("category", " Home ")
        form.update("image_url", "https://img.test/lamp.jpg")
        form.update("condition", "like-new")

        await form.submit()

        fields = client.insert_product.await_args.args[0]
        self.assertEqual(fields["category"], "Home")
        self.assertEqual(fields["image_url"], "https://img.test/lamp.jpg")
        self.assertEqual(fields["condition"], "like-new")


class TestListingFormFields(unittest.TestCase):
    """Field updates and submit gating."""

    def test_defaults(self) -> None:
        """A new form is idle with condition 'new'."""
        form, *_ = _form()
        self.assertEqual(form.state, FormState.IDLE)
        self.assertEqual(form.draft.condition, Condition.NEW)
        self.assertFalse(form.can_submit)

    def test_can_submit_when_complete(self) -> None:
        """Title, description and a valid price enable submit."""
        form, *_ = _form()
        _fill(form)
        self.assertTrue(form.can_submit)

    def test_submitting_blocks_resubmit(self) -> None:
        """A form mid-submit cannot be submitted again."""
        form, *_ = _form()
        _fill(form)
        form.state = FormState.SUBMITTING
        self.assertFalse(form.can_submit)

    def test_unknown_field_rejected(self) -> None:
        """Only draft fields can be updated."""
        form, *_ = _form()
        with self.assertRaises(ValueError):
            form.update("seller_id", "someone-else")

    def test_unknown_condition_rejected(self) -> None:
        """Conditions outside the enum are refused."""
        form, *_ = _form()
        with self.assertRaises(ValueError):
            form.update("condition", "broken")


if __name__ == "__main__":
    unittest.main()
