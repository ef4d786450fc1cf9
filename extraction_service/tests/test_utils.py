import base64
import unittest
from datetime import datetime

from extraction_service.settings import settings
from extraction_service.utils.utils import (
    SUPPORTED_TYPES,
    build_response,
    decode_base64,
    detect_file_type,
    get_app_info,
    get_service_status,
    has_zip_signature,
    resolve_content_type,
    utc_timestamp,
)

from ..tests.utils_helpers import build_docx_bytes, build_pdf_bytes


class TestBase64Decoding(unittest.TestCase):

    def test_decodes_standard_base64(self):
        payload = base64.b64encode(b"plain text body").decode()
        self.assertEqual(decode_base64(payload), b"plain text body")

    def test_ignores_line_wrapping(self):
        payload = base64.encodebytes(b"x" * 200).decode()
        self.assertIn("\n", payload)
        self.assertEqual(decode_base64(payload), b"x" * 200)

    def test_tolerates_missing_padding(self):
        payload = base64.b64encode(b"ab").decode().rstrip("=")
        self.assertEqual(decode_base64(payload), b"ab")

    def test_rejects_characters_outside_alphabet(self):
        with self.assertRaises(ValueError):
            decode_base64("not-base64!!")

    def test_rejects_impossible_length(self):
        with self.assertRaises(ValueError):
            decode_base64("abcde")


class TestFileSniffing(unittest.TestCase):

    def test_zip_signature(self):
        self.assertTrue(has_zip_signature(build_docx_bytes(["hello"])))
        self.assertFalse(has_zip_signature(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 100))
        self.assertFalse(has_zip_signature(b"PK"))

    def test_detect_pdf(self):
        file_type = detect_file_type(build_pdf_bytes(["hello"]))
        self.assertEqual(resolve_content_type(file_type), "application/pdf")

    def test_detect_unknown(self):
        self.assertIsNone(detect_file_type(b"just some words"))
        self.assertEqual(resolve_content_type(None), "unknown")


class TestResponses(unittest.TestCase):

    def test_build_response(self):
        response = build_response(text="a" * 60, extraction_method="Text file reading",
                                  file_name="notes.txt", file_type="text/plain")
        self.assertTrue(response["success"])
        self.assertEqual(response["extractedLength"], 60)
        self.assertEqual(response["originalFileName"], "notes.txt")
        self.assertEqual(response["originalFileType"], "text/plain")
        self.assertEqual(response["extractionMethod"], "Text file reading")
        self.assertIn("timestamp", response)

    def test_service_status(self):
        status = get_service_status()
        self.assertEqual(status["supportedFormats"], ["pdf", "doc", "docx", "txt"])
        self.assertEqual(status["version"], settings.EXTRACTION_SERVICE_VERSION)

    def test_app_info(self):
        info = get_app_info()
        self.assertEqual(info["service_app_name"], "extraction-service")
        self.assertEqual(info["supported_types"], SUPPORTED_TYPES)

    def test_utc_timestamp_is_iso8601(self):
        timestamp = utc_timestamp()
        self.assertTrue(timestamp.endswith("Z"))
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        self.assertIsNotNone(parsed.tzinfo)
