import unittest

from dblc.config import Config, RECURSION_LIMIT, TERMS_SIZE, VALS_SIZE, VAL_LIST_SIZE
from dblc.lang.error import ConfigError


class ConfigTestCase(unittest.TestCase):

    def test_defaults(self):
        config = Config.from_env({})
        self.assertEqual(Config(), config)
        self.assertEqual((TERMS_SIZE, VALS_SIZE, VAL_LIST_SIZE, RECURSION_LIMIT),
                         (config.term_capacity, config.value_capacity, config.env_capacity, config.recursion_limit))

    def test_from_env(self):
        environ = {"DBLC_TERMS_SIZE": "5", "DBLC_VALS_SIZE": " 6 ", "DBLC_VAL_LIST_SIZE": "", "DBLC_RECURSION_LIMIT": "9"}
        self.assertEqual(Config(term_capacity=5, value_capacity=6, recursion_limit=9), Config.from_env(environ))

    def test_invalid(self):
        should_raise = ["0", "-3", "abc", "1.5"]
        for case in should_raise:
            self.assertRaises(ConfigError, Config.from_env, {"DBLC_TERMS_SIZE": case})


if __name__ == '__main__':
    unittest.main()
