# src/ui/add_product_modal.py

"""Modal dialog for listing a new item."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, TextArea

from src.models.product import Condition
from src.services.listing_form import FormState, ListingForm

logger = logging.getLogger("quicksell.ui")

_SUBMIT_LABEL = "Add Product"
_SUBMITTING_LABEL = "Adding Product..."

# Input widget id -> draft field
_INPUT_FIELDS = {
    "title_input": "title",
    "price_input": "price",
    "category_input": "category",
    "image_url_input": "image_url",
}


class AddProductModal(ModalScreen[bool]):
    """Collects listing fields and submits them through a ListingForm.

    Dismisses with True after a successful submit.  Cancelling keeps the
    draft on the form, so reopening the dialog shows the same values.
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, form: ListingForm) -> None:
        super().__init__()
        self.form = form

    def compose(self) -> ComposeResult:
        """Build the dialog from the form's current draft."""
        draft = self.form.draft
        yield Vertical(
            Label("Sell Your Item", id="dialog_title"),
            Label("Title *"),
            Input(
                value=draft.title,
                placeholder="What are you selling?",
                id="title_input",
            ),
            Label("Price *"),
            Input(value=draft.price, placeholder="0.00", id="price_input"),
            Label("Description *"),
            TextArea(draft.description, id="description_input"),
            Label("Condition"),
            Select(
                [(c.label, c.value) for c in Condition],
                value=draft.condition.value,
                allow_blank=False,
                id="condition_select",
            ),
            Label("Category"),
            Input(
                value=draft.category,
                placeholder="e.g., Electronics, Clothing, Books",
                id="category_input",
            ),
            Label("Image URL"),
            Input(
                value=draft.image_url,
                placeholder="https://example.com/image.jpg",
                id="image_url_input",
            ),
            Horizontal(
                Button("Cancel", id="cancel_btn"),
                Button(
                    _SUBMIT_LABEL,
                    variant="primary",
                    id="submit_btn",
                    disabled=not self.form.can_submit,
                ),
                id="dialog_buttons",
            ),
            id="add_product_dialog",
        )

    def _sync_controls(self, busy: bool = False) -> None:
        """Enable submit only when the draft is valid and nothing is in flight."""
        submit_btn = self.query_one("#submit_btn", Button)
        submit_btn.disabled = busy or not self.form.can_submit
        submit_btn.label = _SUBMITTING_LABEL if busy else _SUBMIT_LABEL
        self.query_one("#cancel_btn", Button).disabled = busy

    def on_input_changed(self, event: Input.Changed) -> None:
        """Copy typed values into the draft."""
        field_name = _INPUT_FIELDS.get(event.input.id or "")
        if field_name is None:
            return
        self.form.update(field_name, event.value)
        self._sync_controls()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Copy the description into the draft."""
        self.form.update("description", event.text_area.text)
        self._sync_controls()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Copy the chosen condition into the draft."""
        if isinstance(event.value, str):
            self.form.update("condition", event.value)
            self._sync_controls()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle dialog button clicks."""
        if event.button.id == "cancel_btn":
            self.action_cancel()
        elif event.button.id == "submit_btn":
            await self.submit()

    async def submit(self) -> None:
        """Submit the draft; close on success, keep values on failure."""
        if not self.form.can_submit:
            return
        self._sync_controls(busy=True)
        ok = await self.form.submit()
        if ok:
            logger.debug("Listing submitted, closing dialog")
            self.dismiss(True)
            return
        self._sync_controls()

    def action_cancel(self) -> None:
        """Close without submitting."""
        if self.form.state is FormState.SUBMITTING:
            return
        self.dismiss(False)
