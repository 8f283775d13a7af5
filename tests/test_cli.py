import io

import pytest

from retro_dungeon.cli import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.name == "Hero"
    assert args.seed is None
    assert args.load_path is None
    assert not args.plain


def test_plain_session_runs_until_quit(monkeypatch):
    monkeypatch.delenv("RD_SEED", raising=False)
    out = io.StringIO()
    rc = main(["--plain", "--seed", "7", "--name", "Ada"], stdin=io.StringIO("s\nhelp\nbogus\nquit\n"), stdout=out)
    text = out.getvalue()
    assert rc == 0
    assert "Welcome to the dungeon, Ada!" in text
    assert "Health: " in text
    assert "Move: w/k (north)" in text
    assert "Unknown command." in text
    assert "\033[" not in text


def test_save_command_writes_file(tmp_path):
    target = tmp_path / "ada.sav"
    out = io.StringIO()
    main(["--plain", "--seed", "7", "--name", "Ada"], stdin=io.StringIO(f"save {target}\nq\n"), stdout=out)
    assert "Game saved." in out.getvalue()
    assert target.read_text(encoding="utf-8").startswith("Ada\n")


def test_load_flag_restores_player(tmp_path):
    save = tmp_path / "bo.sav"
    save.write_text("Bo\n50 120 7 3\n2 150 40 4\n", encoding="utf-8")
    out = io.StringIO()
    rc = main(["--plain", "--load", str(save)], stdin=io.StringIO("quit\n"), stdout=out)
    assert rc == 0
    assert "Welcome back, Bo!" in out.getvalue()
    assert "Health: 50/120  Level: 2  Gold: 40  Dungeon: 4" in out.getvalue()


def test_unreadable_save_exits_with_error(tmp_path):
    out = io.StringIO()
    rc = main(["--load", str(tmp_path / "missing.sav")], stdin=io.StringIO(""), stdout=out)
    assert rc == 1
    assert "Could not load" in out.getvalue()


@pytest.mark.parametrize(
    "content",
    [
        "map:\n  width: 4\n  height: 4\n",
        "- a\n- b\n",
        "map: {width: [\n",
    ],
)
def test_invalid_settings_exit_code(tmp_path, content):
    bad = tmp_path / "bad.yaml"
    bad.write_text(content, encoding="utf-8")
    out = io.StringIO()
    rc = main(["--settings", str(bad)], stdin=io.StringIO(""), stdout=out)
    assert rc == 2
    assert "Invalid settings" in out.getvalue()


def test_blank_name_exits_with_error():
    out = io.StringIO()
    rc = main(["--plain", "--name", "   "], stdin=io.StringIO("quit\n"), stdout=out)
    assert rc == 2
    assert "Invalid name" in out.getvalue()
