import string
import zlib

import pytest

from minigit import cat_file as cf
from minigit.errors import GitError, GitIOError, InvalidHashArgument, UnknownOption

HASH = "10500012fca9b4425b50de67a7258a12cba0c076"


@pytest.fixture
def objects_dir(tmp_path):
    directory = tmp_path / "objects"
    target = directory / HASH[:2] / HASH[2:]
    target.parent.mkdir(parents=True)
    target.write_bytes(zlib.compress(b"blob 3\0asd"))
    return directory


@pytest.mark.parametrize(
    "option",
    [f"-{c}" for c in string.ascii_lowercase if c not in "pst"],
)
def test_rejects_unsuitable_parameter(option):
    with pytest.raises(GitError):
        cf.cat_file(option, "")


def test_unknown_option_with_valid_hash(objects_dir):
    with pytest.raises(UnknownOption) as info:
        cf.cat_file("-x", HASH, objects_dir)
    assert info.value.received == "-x"


def test_decode_object(objects_dir):
    assert cf.decode_object(HASH, objects_dir) == "blob 3\0asd"


def test_size(objects_dir):
    assert cf.object_size(HASH, objects_dir) == "3"


def test_type(objects_dir):
    assert cf.object_type(HASH, objects_dir) == "blob"


def test_content(objects_dir):
    assert cf.object_content(HASH, objects_dir) == "asd"


@pytest.mark.parametrize("option, expected", [("-p", "asd"), ("-s", "3"), ("-t", "blob")])
def test_cat_file_options(objects_dir, option, expected):
    assert cf.cat_file(option, HASH, objects_dir) == expected


def test_missing_object(tmp_path):
    with pytest.raises(InvalidHashArgument):
        cf.cat_file("-p", HASH, tmp_path)


def test_corrupt_object(tmp_path):
    target = tmp_path / HASH[:2] / HASH[2:]
    target.parent.mkdir(parents=True)
    target.write_bytes(b"not zlib")
    with pytest.raises(GitIOError):
        cf.decode_object(HASH, tmp_path)