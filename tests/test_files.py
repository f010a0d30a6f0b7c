import os

import pytest
from faker import Faker

from autoclose.files import copy_file, read_all

fake = Faker()


@pytest.mark.parametrize("size,chunk_size", [(0, 16), (1, 16), (1000, 16), (4096, None)])
def test_copy_file(tmp_path, size, chunk_size):
    source = tmp_path / fake.file_name()
    dest = tmp_path / "copy.bin"
    data = fake.binary(length=size) if size else b""
    source.write_bytes(data)
    assert copy_file(os.fspath(source), os.fspath(dest), chunk_size=chunk_size) == size
    assert dest.read_bytes() == data


def test_copy_missing_source(tmp_path):
    dest = tmp_path / "copy.bin"
    with pytest.raises(FileNotFoundError):
        copy_file(os.fspath(tmp_path / "missing"), os.fspath(dest))
    assert not dest.exists()


def test_copy_into_missing_folder_closes_source(tmp_path, monkeypatch):
    source = tmp_path / "source.txt"
    source.write_text(fake.text())
    closed = []
    real_close = os.close
    monkeypatch.setattr(os, "close", lambda fd: closed.append(fd) or real_close(fd))
    with pytest.raises(FileNotFoundError):
        copy_file(os.fspath(source), os.fspath(tmp_path / "missing" / "dest.txt"))
    assert len(closed) == 1


def test_read_all(tmp_path):
    texts = [fake.text() for _ in range(3)]
    paths = []
    for i, text in enumerate(texts):
        path = tmp_path / f"{i}.txt"
        path.write_text(text)
        paths.append(os.fspath(path))
    assert read_all(*paths) == [t.encode() for t in texts]


def test_read_all_missing_file(tmp_path):
    path = tmp_path / "present.txt"
    path.write_text("x")
    with pytest.raises(FileNotFoundError):
        read_all(os.fspath(path), os.fspath(tmp_path / "missing.txt"))


def test_copy_handles_short_writes(tmp_path, monkeypatch):
    source = tmp_path / "source.bin"
    dest = tmp_path / "dest.bin"
    data = fake.binary(length=100)
    source.write_bytes(data)
    real_write = os.write
    monkeypatch.setattr(os, "write", lambda fd, buf: real_write(fd, bytes(buf[:7])))
    assert copy_file(os.fspath(source), os.fspath(dest), chunk_size=32) == 100
    assert dest.read_bytes() == data
