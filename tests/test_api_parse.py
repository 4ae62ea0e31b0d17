import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app


class ParseEndpointTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app, raise_server_exceptions=False)

    def test_hello(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("/parse", resp.text)

    def test_parse_ok(self):
        resp = self.client.post(
            "/parse",
            json={"summary": "Dom Marie 06.56.91.39.62", "description": "Mme Dupont 170 euros"},
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["type"], "dom")
        self.assertEqual(data["telephone"], "+33656913962")
        self.assertEqual(data["nomFamille"], "Dupont")
        self.assertEqual(data["prix"], "170")

    def test_parse_phone_error_is_answered(self):
        resp = self.client.post("/parse", json={"summary": "tel Paul 0612345", "description": "Martin 150"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "error")
        self.assertTrue(data["telephone"].startswith("Erreur:"))
        self.assertEqual(data["message"], data["telephone"])

    def test_parse_unparseable_summary(self):
        resp = self.client.post("/parse", json={"summary": "rien", "description": ""})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "error")
        self.assertEqual(resp.json()["summary"], "rien")

    def test_missing_fields(self):
        resp = self.client.post("/parse", json={})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "error")

    def test_wrong_field_type(self):
        resp = self.client.post("/parse", json={"summary": 42})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["status"], "error")
        self.assertIn("summary", resp.json()["message"])

    def test_body_not_an_object(self):
        resp = self.client.post("/parse", json=["Dom", "Marie"])
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["status"], "error")

    def test_unexpected_error(self):
        with patch("api.parse.ContactService.parse_event", side_effect=RuntimeError("boom")):
            resp = self.client.post("/parse", json={"summary": "Dom Marie 0612345678"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"status": "error", "message": "Erreur interne"})


if __name__ == "__main__":
    unittest.main()
