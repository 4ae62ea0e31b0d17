import unittest
from unittest.mock import patch

from services.contact_service import SUMMARY_PARSE_ERROR, ContactService


class ContactServiceTests(unittest.TestCase):
    def test_full_event(self):
        record = ContactService.parse_event(
            "Dom Marie 06.56.91.39.62", "Mme Dupont 170 euros", default_price="100"
        )
        self.assertTrue(record.is_ok)
        self.assertEqual(
            record.to_dict(),
            {
                "status": "ok",
                "type": "dom",
                "prenom": "Marie",
                "telephone": "+33656913962",
                "nomFamille": "Dupont",
                "prix": "170",
            },
        )

    def test_rejected_phone_sets_error_status(self):
        record = ContactService.parse_event("tel Paul 01 23 45 67 89", "Martin", default_price="170")
        data = record.to_dict()
        self.assertEqual(data["status"], "error")
        self.assertEqual(data["telephone"], "Erreur: Numéro fixe non autorisé")
        self.assertEqual(data["message"], "Erreur: Numéro fixe non autorisé")
        self.assertEqual(data["prenom"], "Paul")
        self.assertEqual(data["nomFamille"], "Martin")
        self.assertEqual(data["prix"], "170")

    def test_unparseable_summary(self):
        record = ContactService.parse_event("rendez-vous", "Dupont")
        self.assertFalse(record.is_ok)
        self.assertEqual(
            record.to_dict(),
            {"status": "error", "message": SUMMARY_PARSE_ERROR, "summary": "rendez-vous"},
        )

    def test_missing_fields(self):
        record = ContactService.parse_event(None, None)
        self.assertEqual(record.status, "error")
        self.assertIsNone(record.to_dict()["summary"])

    def test_default_price_from_settings(self):
        with patch("services.event_parser.settings") as fake_settings:
            fake_settings.DEFAULT_PRICE = "180"
            record = ContactService.parse_event("skype Anna +41 79 123 45 67", "Schmid")
        self.assertEqual(record.telephone, "+41791234567")
        self.assertEqual(record.prix, "180")


if __name__ == "__main__":
    unittest.main()
