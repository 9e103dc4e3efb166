import os
import stat

from zedlib.info import FileInfo


def _file(tmp_path, data=b"abc"):
    path = tmp_path / "file.bin"
    path.write_bytes(data)
    return path


def test_regular_file_details(tmp_path):
    data = b"hello world"
    path = _file(tmp_path, data)
    info = FileInfo(path)
    assert info.exists() is True
    assert info.size() == len(data)
    assert info.regular() is True
    assert info.directory() is False
    assert info.symlink() is False


def test_times_and_device_match_stat(tmp_path):
    path = _file(tmp_path)
    info = FileInfo(str(path))
    raw = os.stat(path)
    assert info.modified() == int(raw.st_mtime)
    assert info.accessed() == int(raw.st_atime)
    assert info.changed() == int(raw.st_ctime)
    assert info.device() == raw.st_dev
    assert info.mode() == raw.st_mode
    assert stat.S_ISREG(info.mode())


def test_directory(tmp_path):
    info = FileInfo(tmp_path)
    assert info.exists() is True
    assert info.directory() is True
    assert info.regular() is False


def test_missing_path_gives_zeroes(tmp_path):
    info = FileInfo(tmp_path / "missing")
    assert info.exists() is False
    assert info.size() == 0
    assert info.modified() == 0
    assert info.accessed() == 0
    assert info.changed() == 0
    assert info.device() == 0
    assert info.mode() == 0
    assert info.directory() is False
    assert info.regular() is False
    assert info.symlink() is False


def test_symlink(tmp_path):
    target = _file(tmp_path)
    link = tmp_path / "link"
    os.symlink(target, link)
    info = FileInfo(link)
    assert info.symlink() is True
    assert info.regular() is True
    assert FileInfo(target).symlink() is False