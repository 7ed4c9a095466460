from bufkit.cli import main, run
from bufkit.utils import BufkitConfig


def _cfg(values, **kw) -> BufkitConfig:
    params = dict(values=values, capacity=3, offset=0, keep=5, log_level="INFO")
    params.update(kw)
    return BufkitConfig(**params)


def test_run_reports_each_container():
    lines = run(_cfg([3, 1, 4, 2, 5], keep=2, offset=1))
    assert lines == [
        "window: 4 2 5",
        "recent: 2 5",
        "sorted: 1 2 3 4 5",
        "trimmed: 2 3 4",
    ]


def test_run_descending():
    lines = run(_cfg([1, 3, 2], descending=True))
    assert lines[2] == "sorted: 3 2 1"
    assert lines[3] == "trimmed: 2 1"


def test_main_prints_report(capsys, monkeypatch):
    monkeypatch.delenv("BUFKIT_CAPACITY", raising=False)
    main(["--capacity", "2", "1", "2", "3"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "window: 2 3"


def test_main_uses_env_file(tmp_path, capsys):
    env_file = tmp_path / "bufkit.env"
    env_file.write_text("BUFKIT_CAPACITY=1\n")
    main(["--env-file", str(env_file), "1", "2", "3"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "window: 3"
