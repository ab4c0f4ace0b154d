from pathlib import Path

import config
import database
import main
from config import Settings


def test_settings_read_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("DB_HOST", raising=False)
    monkeypatch.delenv("DB_POOL_SIZE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DB_HOST=db.internal\nDB_POOL_SIZE=4\nUNRELATED_KEY=1\n")

    loaded = Settings(_env_file=env_file)
    assert loaded.DB_HOST == "db.internal"
    assert loaded.DB_POOL_SIZE == 4
    assert loaded.DB_PORT == 3306


def test_app_modules_load_from_backend_tree():
    backend = Path(__file__).resolve().parent.parent / "backend"
    for module in (config, database, main):
        assert Path(module.__file__).resolve().parent == backend
