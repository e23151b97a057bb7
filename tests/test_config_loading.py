import json

from conftest import run
from imgloading import Container, LoadingManager
from imgloading.until import config as config_module
from imgloading.until.config import load_config


def _write(tmp_path, data):
    path = tmp_path / "loading.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_returns_default(monkeypatch, tmp_path):
    monkeypatch.setenv(config_module.CONFIG_ENV, str(tmp_path / "missing.json"))
    assert load_config("loading", {"a": 1}) == {"a": 1}
    assert load_config("loading") == {}


def test_broken_file_returns_default(monkeypatch, tmp_path):
    path = tmp_path / "loading.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV, str(path))
    assert load_config("loading", {"b": 2}) == {"b": 2}


def test_manager_from_config(monkeypatch, tmp_path):
    path = _write(tmp_path, {
        "loading": {"text": "请稍候", "color": "#faad14", "gap": 6, "transition": 0.05},
    })
    monkeypatch.setenv(config_module.CONFIG_ENV, str(path))

    manager = LoadingManager.from_config(root=Container(100, 100))

    assert manager.gap == 6
    assert manager.transition == 0.05
    assert manager.defaults.text == "请稍候"
    assert manager.defaults.color == "#faad14"

    async def scenario():
        return manager.show()

    assert run(scenario()).visual.root.style["transition"] == 0.05


def test_shipped_config_is_valid(monkeypatch):
    monkeypatch.delenv(config_module.CONFIG_ENV, raising=False)
    section = load_config("loading")
    assert section["gap"] == 12
    manager = LoadingManager.from_config()
    assert manager.offset == section["offset"]
