import pytest

from evenodd.config import Config, ConfigError, read_config


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_file_not_found(tmp_path):
    with pytest.raises(ConfigError):
        read_config(tmp_path / "no_existe.txt")


def test_empty_file(tmp_path):
    path = _write(tmp_path, "empty.txt", "")
    with pytest.raises(ConfigError):
        read_config(path)


def test_invalid_format(tmp_path):
    path = _write(tmp_path, "invalid.txt", "this is not a config\n")
    with pytest.raises(ConfigError):
        read_config(path)


def test_valid_file(tmp_path):
    path = _write(tmp_path, "archivo.txt", "numbers_per_thread = 6\nthread_num = 2\n")
    config = read_config(path)
    assert config == Config(numbers_per_thread=6, thread_num=2)


def test_missing_file_without_extension(tmp_path):
    with pytest.raises(ConfigError):
        read_config(tmp_path / "archivo")


def test_blank_lines_and_compact_spacing(tmp_path):
    path = _write(tmp_path, "c.txt", "\n   \nnumbers_per_thread=6\n\n\tthread_num =2  \n")
    config = read_config(path)
    assert (config.numbers_per_thread, config.thread_num) == (6, 2)


def test_later_value_overrides(tmp_path):
    path = _write(
        tmp_path, "c.txt", "thread_num = 7\nnumbers_per_thread = 6\nthread_num = 2\n"
    )
    assert read_config(path).thread_num == 2


@pytest.mark.parametrize(
    "text",
    [
        "numbers_per_thread = 6 extra\nthread_num = 2\n",
        "numbers_per_thread = 6abc\nthread_num = 2\n",
        "numbers_per_thread = 6.5\nthread_num = 2\n",
        "numbers_per_threadX = 6\nthread_num = 2\n",
        "numbers_per_thread = \nthread_num = 2\n",
    ],
)
def test_trailing_garbage_rejected(tmp_path, text):
    path = _write(tmp_path, "c.txt", text)
    with pytest.raises(ConfigError):
        read_config(path)


@pytest.mark.parametrize(
    "text",
    [
        "numbers_per_thread = 0\nthread_num = 2\n",
        "numbers_per_thread = 6\nthread_num = -1\n",
        "numbers_per_thread = 6\n",
        "thread_num = 2\n",
    ],
)
def test_non_positive_or_missing_values(tmp_path, text):
    path = _write(tmp_path, "c.txt", text)
    with pytest.raises(ConfigError):
        read_config(path)