# tests/test_config.py
import os
import tempfile
import unittest
from pathlib import Path

from vtree import Config, MemoryHost, Renderer, createElement
from vtree.config import DEFAULTS, get_config


class TestConfig(unittest.TestCase):

    def setUp(self):
        Config.reset()
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "vtree.yaml"

    def tearDown(self):
        Config.reset()
        self.tmp.cleanup()

    def write(self, text):
        self.path.write_text(text, encoding="utf-8")

    def test_defaults_without_file(self):
        cfg = Config(config_file=os.path.join(self.tmp.name, "missing.yaml"))
        self.assertIsNone(cfg.source)
        self.assertIsNone(cfg.resolved_config_path)
        self.assertEqual(cfg.as_dict(), DEFAULTS)

    def test_file_values_override_defaults(self):
        self.write("event_prefix: handle\nlogging:\n  level: DEBUG\n")
        cfg = Config(config_file=str(self.path))
        self.assertEqual(cfg.source, "file")
        self.assertEqual(cfg.get("event_prefix"), "handle")
        self.assertEqual(cfg.get("host"), "memory")
        self.assertEqual(cfg.get_nested("logging.level"), "DEBUG")
        self.assertEqual(cfg.get_nested("logging.missing", "x"), "x")

    def test_is_a_singleton(self):
        first = get_config(config_file=str(self.path))
        self.assertIs(Config(), first)

    def test_reload_picks_up_changes(self):
        self.write("host: memory\n")
        cfg = Config(config_file=str(self.path))
        self.write("host: qt\n")
        cfg.reload()
        self.assertEqual(cfg.get("host"), "qt")

    def test_non_mapping_file_is_rejected(self):
        self.write("- just\n- a list\n")
        with self.assertRaises(ValueError):
            Config(config_file=str(self.path))

    def test_renderer_uses_configured_event_prefix(self):
        self.write("event_prefix: handle\n")
        cfg = Config(config_file=str(self.path))
        host = MemoryHost()
        renderer = Renderer(host=host, config=cfg)
        container = host.create_container()
        calls = []

        renderer.render(createElement("button", {"handleClick": calls.append, "onClick": "plain"}), container)
        button = container.children[0]
        button.click()

        self.assertEqual(len(calls), 1)
        self.assertEqual(button.get("onClick"), "plain")
        self.assertNotIn("handleClick", button.attributes)

    def test_unknown_host_name(self):
        self.write("host: gtk\n")
        cfg = Config(config_file=str(self.path))
        with self.assertRaises(ValueError):
            Renderer(config=cfg)


if __name__ == "__main__":
    unittest.main()
