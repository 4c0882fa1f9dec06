import pytest

from src.tubely.storage.storage_errors import InvalidReferenceFormatError
from src.tubely.storage.storage_refs import StorageObjectRef


def test_reference_uses_comma_without_whitespace() -> None:
    ref = StorageObjectRef(bucket="tubely-videos", key="landscape/abc.mp4")

    assert ref.to_reference() == "tubely-videos,landscape/abc.mp4"


def test_parse_trims_incidental_whitespace() -> None:
    ref = StorageObjectRef.parse("my-bucket,  videos/abc.mp4 ")

    assert ref == StorageObjectRef(bucket="my-bucket", key="videos/abc.mp4")


def test_parse_accepts_written_reference() -> None:
    written = StorageObjectRef(bucket="b", key="portrait/0f.mp4").to_reference()

    assert StorageObjectRef.parse(written).key == "portrait/0f.mp4"


@pytest.mark.parametrize(
    "reference",
    ["onlyonepart", "", "a,b,c", ",key.mp4", "bucket,", " , ", "bucket,key,"],
)
def test_parse_rejects_malformed_references(reference: str) -> None:
    with pytest.raises(InvalidReferenceFormatError):
        StorageObjectRef.parse(reference)
