from awkit.dirs import get_config_dir, get_sync_dir


def test_sync_dir_from_environment(monkeypatch, tmp_path):
    target = tmp_path / "custom-sync"
    monkeypatch.setenv("AW_SYNC_DIR", str(target))
    assert get_sync_dir() == target


def test_sync_dir_defaults_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("AW_SYNC_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    result = get_sync_dir()
    assert result.name == "ActivityWatchSync"
    assert result.parent == tmp_path


def test_config_dir_is_created(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "localappdata"))
    result = get_config_dir()
    assert result.name == "aw-sync"
    assert result.parent.name == "activitywatch"
    assert result.is_dir()
    # Calling again with the directory already present works the same.
    assert get_config_dir() == result