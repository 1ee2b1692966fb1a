import pytest

from hamviz.utils.config import DEFAULTS, interval_from_slider, load_config


class TestConfig:

    def test_defaults_without_path(self):
        cfg = load_config()
        assert cfg == DEFAULTS
        cfg["graph_params"]["n"] = 3
        assert DEFAULTS["graph_params"] == {}

    def test_overrides(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("graph: petersen\ninterval: 0.5\ngraph_params:\n", encoding="utf-8")
        cfg = load_config(str(path))
        assert cfg["graph"] == "petersen"
        assert cfg["interval"] == 0.5
        assert cfg["graph_params"] == {}
        assert cfg["log_level"] == "INFO"

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("speed: 3\n", encoding="utf-8")
        with pytest.raises(KeyError):
            load_config(str(path))

    def test_negative_interval(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("interval: -1\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_shipped_default_config(self):
        import os
        here = os.path.dirname(__file__)
        cfg = load_config(os.path.join(here, "..", "configs", "default.yaml"))
        assert cfg["graph"] == "five_cycle"

    @pytest.mark.parametrize("value, seconds", [(0, 1.5), (500, 1.0), (1400, 0.1), (2000, 0.0)])
    def test_interval_from_slider(self, value, seconds):
        assert interval_from_slider(value) == pytest.approx(seconds)
