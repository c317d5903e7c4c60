#!/usr/bin/env python3
"""
Tests for the JSON configuration manager
"""

import json
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent))

from simplecsv.utils.config import CONFIG_DIR_ENV, DEFAULT_CONFIG, Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp(prefix="simplecsv_config_"))
        self.config_dir = self.temp_dir / "config"

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults_without_file(self):
        config = Config(config_dir=self.config_dir)
        self.assertEqual(config.get_editor_config()['new_column_prefix'], "Column")
        self.assertEqual(config.get_editor_config()['default_filename'], "Untitled.csv")
        self.assertTrue(config.get_editor_config()['confirm_unsaved'])
        self.assertEqual(config.get_log_level(), "INFO")
        self.assertEqual(config.get_recent_files(), [])

    def test_defaults_not_shared_between_instances(self):
        first = Config(config_dir=self.config_dir)
        first.config['editor']['new_column_prefix'] = "Changed"
        self.assertEqual(DEFAULT_CONFIG['editor']['new_column_prefix'], "Column")

    def test_set_editor_config_persists(self):
        config = Config(config_dir=self.config_dir)
        config.set_editor_config(new_column_prefix="Field")

        reloaded = Config(config_dir=self.config_dir)
        self.assertEqual(reloaded.get_editor_config()['new_column_prefix'], "Field")

    def test_missing_keys_are_filled(self):
        self.config_dir.mkdir(parents=True)
        (self.config_dir / 'config.json').write_text(json.dumps({'editor': {'confirm_unsaved': False}}))

        config = Config(config_dir=self.config_dir)

        self.assertFalse(config.get_editor_config()['confirm_unsaved'])
        self.assertEqual(config.get_editor_config()['new_column_prefix'], "Column")
        self.assertEqual(config.get_log_level(), "INFO")
        saved = json.loads((self.config_dir / 'config.json').read_text())
        self.assertIn('recent_files', saved)

    def test_corrupt_file_falls_back_to_defaults(self):
        self.config_dir.mkdir(parents=True)
        (self.config_dir / 'config.json').write_text("{not json")

        with self.assertLogs("simplecsv.config", level="WARNING"):
            config = Config(config_dir=self.config_dir)

        self.assertEqual(config.get_editor_config()['new_column_prefix'], "Column")

    def test_wrong_section_type_falls_back_to_defaults(self):
        self.config_dir.mkdir(parents=True)
        (self.config_dir / 'config.json').write_text(json.dumps({'editor': "oops", 'recent_files': {}}))

        with self.assertLogs("simplecsv.config", level="WARNING"):
            config = Config(config_dir=self.config_dir)

        self.assertEqual(config.get_editor_config(), DEFAULT_CONFIG['editor'])
        self.assertEqual(config.get_recent_files(), [])
        saved = json.loads((self.config_dir / 'config.json').read_text())
        self.assertEqual(saved['editor'], DEFAULT_CONFIG['editor'])

    def test_recent_files(self):
        config = Config(config_dir=self.config_dir)
        config.config['max_recent_files'] = 3
        for name in ["a.csv", "b.csv", "c.csv", "a.csv", "d.csv"]:
            config.add_recent_file(self.temp_dir / name)

        expected = [str(self.temp_dir / n) for n in ["d.csv", "a.csv", "c.csv"]]
        self.assertEqual(config.get_recent_files(), expected)

        config.clear_recent_files()
        self.assertEqual(Config(config_dir=self.config_dir).get_recent_files(), [])

    def test_config_dir_from_environment(self):
        with patch.dict(os.environ, {CONFIG_DIR_ENV: str(self.config_dir)}):
            config = Config()
        self.assertEqual(config.config_file, self.config_dir / 'config.json')

    def test_save_failure_is_logged(self):
        blocker = self.temp_dir / "blocker"
        blocker.write_text("not a directory")
        config = Config(config_dir=blocker / "config")

        with self.assertLogs("simplecsv.config", level="ERROR"):
            config.save_config()


if __name__ == "__main__":
    unittest.main()
