import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from extraction_service.settings import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()  # type: ignore[call-arg]
        self.assertEqual(settings.PORT, 3000)
        self.assertEqual(settings.MAX_REQUEST_BODY_SIZE, 50 * 1024 * 1024)
        self.assertEqual(settings.MIN_TEXT_LENGTH, 50)
        self.assertEqual(settings.PREVIEW_LENGTH, 100)
        self.assertEqual(settings.CORS_ALLOW_ORIGINS, ["*"])
        self.assertFalse(settings.DEBUG_MODE)

    def test_port_alias(self):
        with patch.dict(os.environ, {"PORT": "8080"}, clear=True):
            self.assertEqual(Settings().PORT, 8080)  # type: ignore[call-arg]
        with patch.dict(os.environ, {"EXTRACTION_SERVICE_PORT": "9090"}, clear=True):
            self.assertEqual(Settings().PORT, 9090)  # type: ignore[call-arg]

    def test_cors_origins_list(self):
        env = {"EXTRACTION_SERVICE_CORS_ORIGINS": " http://a.example, http://b.example ,"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()  # type: ignore[call-arg]
        self.assertEqual(settings.CORS_ALLOW_ORIGINS, ["http://a.example", "http://b.example"])

    def test_invalid_values_rejected(self):
        for env in ({"EXTRACTION_SERVICE_LOG_LEVEL": "99"},
                    {"EXTRACTION_SERVICE_PORT": "0"},
                    {"EXTRACTION_SERVICE_MAX_BODY_SIZE": "0"},
                    {"EXTRACTION_SERVICE_MIN_TEXT_LENGTH": "0"}):
            with patch.dict(os.environ, env, clear=True):
                with self.assertRaises(ValidationError):
                    Settings()  # type: ignore[call-arg]
