"""
Unit tests for field classification.
"""
import unittest

from dmmf_graph.domain.descriptors import FieldDescriptor
from dmmf_graph.domain.fields import ExtendedField


def make_field(name="value", kind="scalar", type_="String", **extra) -> ExtendedField:
    return ExtendedField(FieldDescriptor(name=name, kind=kind, type=type_, **extra), "Sample")


class TestFieldKind(unittest.TestCase):

    def test_kind_is_taken_from_descriptor(self):
        self.assertTrue(make_field(kind="scalar").is_scalar)
        self.assertTrue(make_field(kind="object", type_="Post").is_relation)
        self.assertTrue(make_field(kind="enum", type_="Role").is_enum)

    def test_kind_flags_are_exclusive(self):
        field = make_field(kind="enum", type_="Role")

        self.assertFalse(field.is_scalar)
        self.assertFalse(field.is_relation)


class TestSpecialTypes(unittest.TestCase):

    def test_json_type(self):
        field = make_field(type_="Json")

        self.assertTrue(field.is_json_type)
        self.assertFalse(field.is_decimal_type)

    def test_decimal_type(self):
        field = make_field(type_="Decimal")

        self.assertTrue(field.is_decimal_type)
        self.assertFalse(field.is_json_type)

    def test_type_names_are_case_sensitive(self):
        self.assertFalse(make_field(type_="json").is_json_type)
        self.assertFalse(make_field(type_="DECIMAL").is_decimal_type)


class TestFieldPredicates(unittest.TestCase):

    def test_omit_field_for_input_and_all_targets(self):
        self.assertTrue(make_field(omit=("input",)).is_omit_field())
        self.assertTrue(make_field(omit=("all",)).is_omit_field())

    def test_model_only_omit_is_not_write_omit(self):
        self.assertFalse(make_field(omit=("model",)).is_omit_field())
        self.assertFalse(make_field().is_omit_field())

    def test_optional_default_field(self):
        self.assertTrue(make_field(has_default_value=True).is_optional_default_field())
        self.assertTrue(make_field(is_updated_at=True).is_optional_default_field())
        self.assertFalse(make_field().is_optional_default_field())

    def test_nullable_is_inverse_of_required(self):
        self.assertTrue(make_field(is_required=False).is_nullable)
        self.assertFalse(make_field(is_required=True).is_nullable)

    def test_error_location_names_model_and_field(self):
        field = make_field(name="email")

        self.assertEqual(field.model_name, "Sample")
        self.assertEqual(field.error_location, "[Error Location]: Model: 'Sample', Field: 'email'.")
        self.assertEqual(field.formatted_names.snake_case, "email")


if __name__ == "__main__":
    unittest.main()
