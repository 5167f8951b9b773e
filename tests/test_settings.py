import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from cornprice.config.settings import Settings


class TestSettings(unittest.TestCase):
    def test_port_defaults_to_4000(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.PORT, 4000)
        self.assertEqual(settings.QUOTE_SYMBOL, "ZC=F")
        self.assertEqual(settings.POLL_INTERVAL_SEC, 5.0)

    def test_port_from_env(self):
        with patch.dict(os.environ, {"PORT": "8080"}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.PORT, 8080)

    def test_blank_port_uses_default(self):
        with patch.dict(os.environ, {"PORT": "  "}, clear=True):
            self.assertEqual(Settings.from_env().PORT, 4000)

    def test_invalid_port_fails_validation(self):
        for raw in ("abc", "0", "70000"):
            with self.subTest(port=raw):
                with patch.dict(os.environ, {"PORT": raw}, clear=True):
                    with self.assertRaises(ValidationError):
                        Settings.from_env()


if __name__ == "__main__":
    unittest.main()
