import unittest

from densetensor.domain._access_mode import AccessMode


class TestAccessMode(unittest.TestCase):
    def test_parse_accepts_members_and_strings(self) -> None:
        self.assertIs(AccessMode.parse(AccessMode.CHECKED), AccessMode.CHECKED)
        self.assertIs(AccessMode.parse("checked"), AccessMode.CHECKED)
        self.assertIs(AccessMode.parse("unchecked"), AccessMode.UNCHECKED)

    def test_parse_rejects_unknown_modes(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            AccessMode.parse("strict")
        self.assertIn("Invalid access mode", str(ctx.exception))

    def test_str_is_value(self) -> None:
        self.assertEqual(str(AccessMode.CHECKED), "checked")


if __name__ == "__main__":
    unittest.main()
