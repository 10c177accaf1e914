"""Unit tests for gatekeeper.services.validation: normalization, bounds, and issue messages."""

import unittest

from gatekeeper.core.exceptions import ValidationFailure
from gatekeeper.services.validation import validate_signup


def _payload(**overrides: object) -> dict:
    payload = {"name": "Ada", "email": "ada@example.com", "password": "secret1"}
    payload.update(overrides)
    return payload


class TestValidSignup(unittest.TestCase):
    def test_minimal_payload_defaults_role(self) -> None:
        signup = validate_signup({"name": "Al", "email": "a@b.com", "password": "secret1"})
        self.assertEqual(signup.name, "Al")
        self.assertEqual(signup.email, "a@b.com")
        self.assertEqual(signup.password, "secret1")
        self.assertEqual(signup.role, "user")

    def test_admin_role_accepted(self) -> None:
        self.assertEqual(validate_signup(_payload(role="admin")).role, "admin")

    def test_email_trimmed_and_lowercased(self) -> None:
        self.assertEqual(
            validate_signup(_payload(email="  Foo@Bar.COM  ")).email, "foo@bar.com"
        )

    def test_name_trimmed(self) -> None:
        self.assertEqual(validate_signup(_payload(name="  Grace Hopper ")).name, "Grace Hopper")

    def test_password_not_trimmed(self) -> None:
        self.assertEqual(validate_signup(_payload(password="  pass  ")).password, "  pass  ")

    def test_password_length_bounds(self) -> None:
        self.assertEqual(len(validate_signup(_payload(password="x" * 6)).password), 6)
        self.assertEqual(len(validate_signup(_payload(password="x" * 128)).password), 128)

    def test_name_length_bounds(self) -> None:
        self.assertEqual(validate_signup(_payload(name="Al")).name, "Al")
        self.assertEqual(len(validate_signup(_payload(name="n" * 255)).name), 255)

    def test_unknown_fields_ignored(self) -> None:
        signup = validate_signup(_payload(is_admin=True))
        self.assertFalse(hasattr(signup, "is_admin"))

    def test_deterministic(self) -> None:
        self.assertEqual(validate_signup(_payload()), validate_signup(_payload()))


class TestInvalidSignup(unittest.TestCase):
    def _issues(self, payload: object) -> list[str]:
        with self.assertRaises(ValidationFailure) as ctx:
            validate_signup(payload)
        return ctx.exception.issues

    def test_password_too_short(self) -> None:
        issues = self._issues(_payload(password="x" * 5))
        self.assertEqual(len(issues), 1)
        self.assertTrue(issues[0].startswith("password:"))

    def test_password_too_long(self) -> None:
        issues = self._issues(_payload(password="x" * 129))
        self.assertEqual(len(issues), 1)
        self.assertTrue(issues[0].startswith("password:"))

    def test_name_too_short_after_trim(self) -> None:
        issues = self._issues(_payload(name=" A "))
        self.assertTrue(issues[0].startswith("name:"))

    def test_name_too_long(self) -> None:
        self.assertTrue(self._issues(_payload(name="n" * 256))[0].startswith("name:"))

    def test_invalid_email(self) -> None:
        for bad in ("not-an-email", "a@", "@b.com", ""):
            with self.subTest(email=bad):
                self.assertTrue(self._issues(_payload(email=bad))[0].startswith("email:"))

    def test_email_too_long(self) -> None:
        issues = self._issues(_payload(email="a" * 250 + "@b.com"))
        self.assertEqual(issues, ["email: Email must be at most 255 characters"])

    def test_unknown_role(self) -> None:
        self.assertTrue(self._issues(_payload(role="superuser"))[0].startswith("role:"))

    def test_non_string_password(self) -> None:
        self.assertTrue(self._issues(_payload(password=1234567))[0].startswith("password:"))

    def test_missing_fields_reported_in_field_order(self) -> None:
        issues = self._issues({})
        self.assertEqual([i.split(":")[0] for i in issues], ["name", "email", "password"])

    def test_non_object_payload(self) -> None:
        for payload in (None, [], "name=Ada", 42):
            with self.subTest(payload=payload):
                self.assertEqual(self._issues(payload), ["Request body must be a JSON object"])

    def test_details_joins_issues(self) -> None:
        with self.assertRaises(ValidationFailure) as ctx:
            validate_signup({"name": "A", "email": "a@b.com", "password": "123"})
        details = ctx.exception.details
        self.assertIn("name:", details)
        self.assertIn("password:", details)
        self.assertEqual(details, ", ".join(ctx.exception.issues))


if __name__ == "__main__":
    unittest.main()
