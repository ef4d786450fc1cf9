import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from extraction_service.api.health import health_api, status_api
from extraction_service.utils.utils import SUPPORTED_TYPES


class TestHealthApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app = FastAPI()
        self.app.include_router(status_api)
        self.app.include_router(health_api)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()

    def test_health_returns_healthy(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_info(self):
        response = self.client.get("/api/info")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["service_app_name"], "extraction-service")
        self.assertEqual(data["supported_types"], SUPPORTED_TYPES)

    def test_status_lists_formats(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.json().keys()), {"status", "supportedFormats", "version"})
