import dataclasses
import unittest

from models.country_rules import COUNTRY_RULES, CountryRule, LinePattern, get_country, validate_rules


class CountryTableTests(unittest.TestCase):
    def test_table_order_and_ids(self):
        self.assertEqual([r.id for r in COUNTRY_RULES], ["FR", "CH", "BE", "IT", "AND", "RUN", "DE"])

    def test_get_country(self):
        fr = get_country("FR")
        self.assertIsNotNone(fr)
        self.assertEqual(fr.display_name, "France")
        self.assertEqual(fr.international_prefix, "33")
        self.assertEqual(get_country("run").international_prefix, "262")

    def test_unknown_country_is_not_guessed(self):
        self.assertIsNone(get_country("US"))
        self.assertIsNone(get_country(""))
        self.assertIsNone(get_country(None))

    def test_swiss_landline_excludes_mobile_prefix(self):
        landline = get_country("CH").line_patterns[1]
        self.assertEqual(landline.label, "Fixe CH")
        self.assertIn("417", landline.excluded_prefixes)
        self.assertFalse(landline.matches("41791234567"))
        self.assertTrue(landline.matches("41223456789"))

    def test_rules_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            COUNTRY_RULES[0].international_prefix = "44"

    def test_french_local_form_substitution(self):
        fr = get_country("FR")
        self.assertEqual(fr.to_international("0612345678"), "33612345678")
        self.assertEqual(get_country("CH").to_international("0612345678"), "0612345678")


class LengthRuleTests(unittest.TestCase):
    def test_exact_length(self):
        p = LinePattern(label="X", accepted_prefixes=frozenset({"32"}), length=11)
        self.assertTrue(p.has_valid_length("32412345678"))
        self.assertFalse(p.has_valid_length("3241234567"))

    def test_range_is_inclusive(self):
        p = get_country("DE").line_patterns[0]
        self.assertTrue(p.has_valid_length("4" * 11))
        self.assertTrue(p.has_valid_length("4" * 15))
        self.assertFalse(p.has_valid_length("4" * 10))
        self.assertFalse(p.has_valid_length("4" * 16))


class ValidateRulesTests(unittest.TestCase):
    def _rule(self, rid="XX", prefix="99", **pattern_kwargs):
        kwargs = {"label": "XX", "accepted_prefixes": frozenset({prefix + "1"}), "length": 10}
        kwargs.update(pattern_kwargs)
        return CountryRule(
            id=rid,
            display_name="Test",
            international_prefix=prefix,
            line_patterns=(LinePattern(**kwargs),),
        )

    def test_default_table_is_valid(self):
        validate_rules(COUNTRY_RULES)

    def test_duplicate_id(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(), self._rule()])

    def test_prefix_outside_country(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(accepted_prefixes=frozenset({"12"}))])

    def test_empty_accepted_prefixes(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(accepted_prefixes=frozenset())])

    def test_missing_length_rule(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(length=None)])

    def test_both_length_rules(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(min_length=5, max_length=8)])

    def test_inverted_range(self):
        with self.assertRaises(ValueError):
            validate_rules([self._rule(length=None, min_length=9, max_length=8)])


if __name__ == "__main__":
    unittest.main()
