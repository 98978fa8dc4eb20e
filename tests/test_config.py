"""
Tests for the configuration module
"""
import unittest
import tempfile
import os
import yaml
from meme_generator.config import Config


class TestConfig(unittest.TestCase):
    """Tests for the Config class"""

    def _write_yaml(self, content):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump(content, f)
            return f.name

    def test_default_configuration(self):
        """Defaults are set correctly"""
        config = Config()

        self.assertEqual(config.get('output_dir'), './output')
        self.assertEqual(config.get('export_scale'), 2)
        self.assertIsNone(config.get('font_path'))
        self.assertEqual(config.get('preview')['max_height'], 400)
        self.assertEqual(config.get('top_text')['vertical_position'], 15)
        self.assertEqual(config.get('bottom_text')['vertical_position'], 85)

    def test_get_with_default_value(self):
        """get() falls back to the supplied default"""
        config = Config()

        self.assertEqual(config.get('output_dir'), './output')
        self.assertEqual(config.get('non_existent_key', 'default_value'), 'default_value')
        self.assertIsNone(config.get('non_existent_key'))

    def test_load_from_valid_yaml_file(self):
        """Values from a YAML file override the defaults"""
        temp_file = self._write_yaml({
            'output_dir': './custom_output',
            'export_scale': 4,
            'font_path': '/fonts/Impact.ttf',
        })

        try:
            config = Config(config_file=temp_file)

            self.assertEqual(config.get('output_dir'), './custom_output')
            self.assertEqual(config.get('export_scale'), 4)
            self.assertEqual(config.get('font_path'), '/fonts/Impact.ttf')
        finally:
            os.unlink(temp_file)

    def test_load_from_nonexistent_file(self):
        """A missing file is not an error"""
        config = Config(config_file='/path/to/nonexistent/file.yaml')

        self.assertEqual(config.get('output_dir'), './output')
        self.assertEqual(config.get('export_scale'), 2)

    def test_load_from_invalid_yaml_file(self):
        """Malformed YAML raises a descriptive error"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write("invalid: yaml: content: [")
            temp_file = f.name

        try:
            with self.assertRaises(Exception) as context:
                Config(config_file=temp_file)

            self.assertIn("Error loading configuration file", str(context.exception))
        finally:
            os.unlink(temp_file)

    def test_load_from_empty_yaml_file(self):
        """An empty file keeps the defaults"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            temp_file = f.name

        try:
            config = Config(config_file=temp_file)
            self.assertEqual(config.get('output_dir'), './output')
        finally:
            os.unlink(temp_file)

    def test_configuration_precedence(self):
        """Precedence: default < file < CLI"""
        temp_file = self._write_yaml({
            'output_dir': './file_output',
            'export_scale': 3,
        })

        try:
            config = Config(config_file=temp_file)
            self.assertEqual(config.get('output_dir'), './file_output')
            self.assertEqual(config.get('export_scale'), 3)

            config.update_from_args({
                'export_scale': 1,
                'output_dir': None,
            })

            self.assertEqual(config.get('export_scale'), 1)
            # None does not override the file value
            self.assertEqual(config.get('output_dir'), './file_output')
        finally:
            os.unlink(temp_file)

    def test_config_immutability_via_get_all(self):
        """get_all returns a deep copy"""
        config = Config()

        config_copy = config.get_all()
        config_copy['output_dir'] = './modified'
        config_copy['top_text']['content'] = 'changed'

        self.assertEqual(config.get('output_dir'), './output')
        self.assertEqual(config.get('top_text')['content'], '')

    def test_defaults_are_not_shared_between_instances(self):
        first = Config()
        first.get('top_text')['content'] = 'mutated'
        self.assertEqual(Config().get('top_text')['content'], '')


if __name__ == "__main__":
    unittest.main()
