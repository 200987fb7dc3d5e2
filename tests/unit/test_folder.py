import logging
import os
import stat
import sys

import pytest

from writebench import WBConfigError, clean_folder, create_test_folder


def test_create_test_folder(tmp_path):
    sub = create_test_folder(tmp_path)
    assert sub == tmp_path / "TEST_FOLDER"
    assert sub.is_dir()


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_create_test_folder_private_mode(tmp_path):
    sub = create_test_folder(tmp_path)
    assert stat.S_IMODE(sub.stat().st_mode) == 0o700


def test_create_custom_name(tmp_path):
    assert create_test_folder(tmp_path, "runs").name == "runs"


def test_missing_root_rejected(tmp_path):
    with pytest.raises(WBConfigError):
        create_test_folder(tmp_path / "nope")


def test_root_is_a_file_rejected(tmp_path):
    f = tmp_path / "file"
    f.write_bytes(b"")
    with pytest.raises(WBConfigError):
        create_test_folder(f)


def test_existing_subfolder_rejected(tmp_path):
    (tmp_path / "TEST_FOLDER").mkdir()
    (tmp_path / "TEST_FOLDER" / "keep.txt").write_text("mine")
    with pytest.raises(WBConfigError):
        create_test_folder(tmp_path)
    assert (tmp_path / "TEST_FOLDER" / "keep.txt").read_text() == "mine"


def _populate(folder, n=3):
    for i in range(n):
        (folder / f"small_{i}").write_bytes(b"\x00" * 10)


def test_clean_folder_removes_files_and_folder(tmp_path):
    sub = create_test_folder(tmp_path)
    _populate(sub)
    assert clean_folder(sub) is True
    assert not sub.exists()


def test_clean_empty_folder(tmp_path):
    sub = create_test_folder(tmp_path)
    assert clean_folder(sub) is True
    assert not sub.exists()


def test_clean_folder_declined(tmp_path):
    sub = create_test_folder(tmp_path)
    _populate(sub)
    asked = []

    def decline(folder):
        asked.append(folder)
        return False

    assert clean_folder(sub, confirm=decline) is False
    assert asked == [sub]
    assert len(os.listdir(sub)) == 3


def test_clean_folder_confirmed(tmp_path):
    sub = create_test_folder(tmp_path)
    _populate(sub)
    assert clean_folder(sub, confirm=lambda folder: True) is True
    assert not sub.exists()


def test_clean_missing_folder(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="writebench"):
        assert clean_folder(tmp_path / "gone") is False
    assert "not found" in caplog.text


def test_show_deletion_logs_each_file(tmp_path, caplog):
    sub = create_test_folder(tmp_path)
    _populate(sub, 2)
    with caplog.at_level(logging.INFO, logger="writebench"):
        clean_folder(sub, show_deletion=True)
    assert str(sub / "small_0") in caplog.text
    assert str(sub / "small_1") in caplog.text


def test_deletions_quiet_by_default(tmp_path, caplog):
    sub = create_test_folder(tmp_path)
    _populate(sub, 2)
    with caplog.at_level(logging.INFO, logger="writebench"):
        clean_folder(sub)
    assert str(sub / "small_0") not in caplog.text


def test_folder_kept_when_a_file_cannot_be_removed(tmp_path, caplog):
    sub = create_test_folder(tmp_path)
    _populate(sub, 2)
    (sub / "nested").mkdir()
    with caplog.at_level(logging.WARNING, logger="writebench"):
        assert clean_folder(sub) is False
    assert sub.is_dir()
    assert os.listdir(sub) == ["nested"]
    assert "manually" in caplog.text
