from renderer.config import GradientConfiguration, load_configuration
from renderer.exceptions import ConfigurationError
import os
from tempfile import TemporaryDirectory
from unittest import TestCase


DATA_PATH: str = os.path.join(os.path.dirname(__file__), "..", "data")


class TestConfiguration(TestCase):

    def write_configuration(self, directory: str, contents: str) -> str:
        path = os.path.join(directory, "config.hjson")
        with open(path, 'w') as outfile:
            outfile.write(contents)
        return path

    def test_defaults(self):
        configuration = load_configuration()
        self.assertEqual(configuration, GradientConfiguration())
        self.assertEqual(configuration.width, 256)
        self.assertEqual(configuration.height, 256)
        self.assertEqual(configuration.blue, 0.25)
        self.assertEqual(configuration.intensity, 1.0)
        self.assertTrue(configuration.use_kernel)

    def test_bundled_configuration(self):
        configuration = load_configuration(os.path.join(DATA_PATH, "gradient_config.hjson"))
        self.assertEqual(configuration.width, 256)
        self.assertEqual(configuration.output_path, "gradient.png")

    def test_partial_hjson(self):
        with TemporaryDirectory() as temppath:
            path = self.write_configuration(temppath, "{\n  # small\n  width: 8\n  use_kernel: false\n}\n")
            configuration = load_configuration(path)
        self.assertEqual(configuration.width, 8)
        self.assertEqual(configuration.height, 256)
        self.assertFalse(configuration.use_kernel)

    def test_invalid_values(self):
        with TemporaryDirectory() as temppath:
            for contents in ["{\n  width: 1\n}\n", "{\n  height: -4\n}\n", "{\n  intensity: \"many\"\n}\n", "[\n  1\n  2\n]\n"]:
                path = self.write_configuration(temppath, contents)
                with self.assertRaises(ConfigurationError):
                    load_configuration(path)

    def test_malformed_file(self):
        with TemporaryDirectory() as temppath:
            path = self.write_configuration(temppath, "{\n  width: 8\n")
            with self.assertRaises(ConfigurationError):
                load_configuration(path)

    def test_missing_file(self):
        with TemporaryDirectory() as temppath:
            with self.assertRaises(ConfigurationError) as context:
                load_configuration(os.path.join(temppath, "nope.hjson"))
            self.assertIn("nope.hjson", context.exception.message)
