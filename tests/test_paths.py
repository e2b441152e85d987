import os

from message_expander.core.paths import file_extension, is_absolute_path, resolve_path


def test_posix_and_backslash_roots_are_absolute():
    assert is_absolute_path("/etc/prompt.json")
    assert is_absolute_path("\\share\\prompt.json")


def test_drive_letter_paths_are_absolute():
    assert is_absolute_path("C:\\msgs\\a.json")
    assert is_absolute_path("d:/msgs/a.json")
    assert not is_absolute_path("C:relative.json")


def test_unc_paths_are_absolute():
    assert is_absolute_path("\\\\server\\share\\a.json")


def test_relative_paths():
    assert not is_absolute_path("a.json")
    assert not is_absolute_path("./parts/a.json")
    assert not is_absolute_path("")


def test_resolve_path_joins_relative_to_base():
    assert resolve_path("parts/a.json", "/base") == os.path.join("/base", "parts/a.json")
    assert resolve_path("/abs/a.json", "/base") == "/abs/a.json"
    assert resolve_path("C:/x.json", "/base") == "C:/x.json"


def test_file_extension_uses_last_dot_of_base_name():
    assert file_extension("/a/b/foo.c") == "c"
    assert file_extension("/a/b/archive.tar.gz") == "gz"
    assert file_extension("/a/b.d/Makefile") == ""
    assert file_extension("/a/b/.bashrc") == "bashrc"
    assert file_extension("C:\\msgs\\notes.TXT") == "TXT"
    assert file_extension("trailing.") == ""
