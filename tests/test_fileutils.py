from datetime import datetime, timedelta

import pytest

from rpgdev.fileutils import get_file_metadata, read_last_n_bytes

TEST_CONTENT = "Hello, World! This is a test file with some content."

HISTORY_CONTENT = (
    ": 1640995200:0;docker run nginx\n"
    ": 1640995300:0;go build\n"
    ': 1640995400:0;git commit -m "test"\n'
    ": 1640995500:0;npm install\n"
    ": 1640995600:0;unknown command\n"
)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "test.txt"
    path.write_bytes(TEST_CONTENT.encode())
    return path


@pytest.mark.parametrize(
    "n, expected",
    [
        (10, "e content."),
        (20, "e with some content."),
        (100, TEST_CONTENT),
        (0, ""),
    ],
)
def test_read_last_n_bytes(sample_file, n, expected):
    assert read_last_n_bytes(sample_file, n) == expected.encode()


def test_read_last_n_bytes_exact_size(sample_file):
    assert read_last_n_bytes(sample_file, len(TEST_CONTENT)) == TEST_CONTENT.encode()


def test_read_last_n_bytes_negative(sample_file):
    with pytest.raises(ValueError):
        read_last_n_bytes(sample_file, -1)


def test_read_last_n_bytes_non_existent_file():
    with pytest.raises(FileNotFoundError):
        read_last_n_bytes("/non/existent/file", 10)


def test_get_file_metadata(tmp_path):
    content = "Test content for metadata"
    path = tmp_path / "metadata_test.txt"
    path.write_bytes(content.encode())

    mod_time, size = get_file_metadata(path)
    assert size == len(content)
    assert datetime.now().astimezone() - mod_time < timedelta(minutes=1)


def test_get_file_metadata_non_existent_file():
    with pytest.raises(FileNotFoundError):
        get_file_metadata("/non/existent/file")


def test_history_file_integration(tmp_path):
    path = tmp_path / ".zsh_history"
    path.write_bytes(HISTORY_CONTENT.encode())

    metadata = get_file_metadata(path)
    assert metadata.size == len(HISTORY_CONTENT)
    assert read_last_n_bytes(path, 1024) == HISTORY_CONTENT.encode()