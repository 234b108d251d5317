# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_api_url_has_no_trailing_slash(self) -> None:
        """API_URL is normalised so paths can be appended directly."""
        self.assertFalse(Settings.API_URL.endswith("/"))
        self.assertTrue(Settings.API_URL.startswith("http"))

    def test_api_key_is_string(self) -> None:
        """API_KEY is always a string, empty when unset."""
        self.assertIsInstance(Settings.API_KEY, str)

    def test_request_timeout_is_positive_int(self) -> None:
        """REQUEST_TIMEOUT must be a positive integer."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_default_headers_are_json(self) -> None:
        """Every request negotiates JSON."""
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Accept"], "application/json"
        )
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Content-Type"], "application/json"
        )

    def test_table_names(self) -> None:
        """Table names match the backend schema."""
        self.assertEqual(Settings.PRODUCTS_TABLE, "products")
        self.assertEqual(Settings.PROFILES_TABLE, "profiles")

    def test_anonymous_seller_label(self) -> None:
        """Sellers without a profile show this label."""
        self.assertEqual(Settings.ANONYMOUS_SELLER, "Anonymous Seller")

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_impersonate_browser_is_string(self) -> None:
        """IMPERSONATE_BROWSER must be a non-empty string."""
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)


if __name__ == "__main__":
    unittest.main()
