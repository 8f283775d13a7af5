import pytest

from retro_dungeon.entities.models import Player
from retro_dungeon.exceptions import SaveFormatError
from retro_dungeon.map.position import Position
from retro_dungeon.persistence.save_file import SaveRecord, read_save, write_save


def test_text_layout():
    record = SaveRecord("Hero", 90, 100, 5, 2, 1, 30, 15, 2)
    assert record.to_text() == "Hero\n90 100 5 2\n1 30 15 2\n"


def test_names_with_spaces_survive(tmp_path):
    record = SaveRecord("Sir Robin of Camelot", 1, 100, 5, 2, 1, 0, 0, 1)
    write_save(tmp_path / "s.sav", record)
    assert read_save(tmp_path / "s.sav") == record


def test_write_creates_parent_dirs_and_leaves_no_temp(tmp_path):
    target = tmp_path / "saves" / "slot1.sav"
    write_save(target, SaveRecord("Hero", 1, 1, 1, 1, 1, 1, 1, 1))
    assert target.exists()
    assert not (target.parent / "slot1.sav.tmp").exists()


def test_from_player_and_apply_to():
    player = Player.create(1, "Hero", Position(3, 3))
    player.gold = 12
    record = SaveRecord.from_player(player)
    blank = Player.create(2, "Other", Position(0, 0))
    record.apply_to(blank)
    assert blank.name == "Hero"
    assert blank.gold == 12
    assert blank.position == Position(0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Hero\n",
        "Hero\n100 100 5 2\n",
        "\n100 100 5 2\n1 0 0 1\n",
        "Hero\n100 100 5\n1 0 0 1\n",
        "Hero\n100 100 five 2\n1 0 0 1\n",
        "Hero\n100 0 5 2\n1 0 0 1\n",
        "Hero\n100 100 5 2\n0 0 0 1\n",
    ],
)
def test_malformed_saves_are_rejected(text):
    with pytest.raises(SaveFormatError):
        SaveRecord.from_text(text)


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        read_save(tmp_path / "missing.sav")


@pytest.mark.parametrize("name", ["Sep\u2028arated", "Next\x85Line", "Form\x0cFeed"])
def test_only_newlines_separate_fields(tmp_path, name):
    record = SaveRecord(name, 10, 100, 5, 2, 1, 0, 0, 1)
    write_save(tmp_path / "s.sav", record)
    assert read_save(tmp_path / "s.sav") == record
