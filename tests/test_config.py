import os
import tempfile
import unittest

from config import FLAT_WORDS_JSON_NAME, PRECISE_LAYOUT_DB_NAME, PRECISE_WORDS_DB_NAME, Settings


class TestCorpusPaths(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_paths_follow_data_dir(self):
        config = Settings(MUSHAF_DATA_DIR=self.tmp.name)

        self.assertEqual(config.PRECISE_LAYOUT_DB_PATH, os.path.join(self.tmp.name, PRECISE_LAYOUT_DB_NAME))
        self.assertEqual(config.PRECISE_WORDS_DB_PATH, os.path.join(self.tmp.name, PRECISE_WORDS_DB_NAME))
        self.assertEqual(config.FLAT_WORDS_JSON_PATH, os.path.join(self.tmp.name, FLAT_WORDS_JSON_NAME))
        self.assertEqual(config.layout_metadata_db_path, config.PRECISE_LAYOUT_DB_PATH)

    def test_explicit_path_wins(self):
        flat_path = os.path.join(self.tmp.name, "other", "words.json")
        config = Settings(MUSHAF_DATA_DIR=self.tmp.name, FLAT_WORDS_JSON_PATH=flat_path)

        self.assertEqual(config.FLAT_WORDS_JSON_PATH, flat_path)
        self.assertEqual(config.PRECISE_LAYOUT_DB_PATH, os.path.join(self.tmp.name, PRECISE_LAYOUT_DB_NAME))

    def test_data_dir_from_environment(self):
        previous = os.environ.get("MUSHAF_DATA_DIR")
        os.environ["MUSHAF_DATA_DIR"] = self.tmp.name
        try:
            config = Settings()
        finally:
            if previous is None:
                del os.environ["MUSHAF_DATA_DIR"]
            else:
                os.environ["MUSHAF_DATA_DIR"] = previous

        self.assertTrue(config.PRECISE_WORDS_DB_PATH.startswith(self.tmp.name))


if __name__ == "__main__":
    unittest.main()
