from pathlib import Path

from sparse_life.io.paths import history_log_path, logs_dir, save_path


def test_save_path_uses_default_name(tmp_path: Path) -> None:
    assert save_path(tmp_path) == tmp_path / "gameOfLife_save.txt"


def test_history_log_lives_in_logs_dir(tmp_path: Path) -> None:
    assert logs_dir(tmp_path) == tmp_path / "logs"
    assert history_log_path(tmp_path) == tmp_path / "logs" / "history.parquet"
