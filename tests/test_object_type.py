import pytest

from minigit.errors import ObjectTypeError
from minigit.object_type import ObjectType


def test_blob_header():
    assert ObjectType.BLOB.add_header(b"asd") == b"blob 3\0asd"


def test_header_for_empty_content_has_zero_size():
    assert ObjectType.TREE.add_header(b"") == b"tree 0\0"


@pytest.mark.parametrize("obj_type", list(ObjectType))
def test_header_round_trip(obj_type):
    content = b"some\0content"
    data = obj_type.add_header(content)
    header, _, rest = data.partition(b"\0")
    name, size = header.decode().split(" ")
    assert ObjectType.from_name(name) is obj_type
    assert int(size) == len(content)
    assert rest == content


@pytest.mark.parametrize("obj_type", list(ObjectType))
def test_str_matches_name(obj_type):
    assert ObjectType.from_name(str(obj_type)) is obj_type


def test_from_name_rejects_unknown():
    with pytest.raises(ObjectTypeError) as info:
        ObjectType.from_name("tag")
    assert info.value.got == "tag"
    assert info.value.expected == "tree, blob or commit"