"""Tests for FileMeta, Blob and media-type parsing."""

import pytest

from pubky_app_specs.config.models import MIB, BlobsConfig, SpecsConfig
from pubky_app_specs.domain.errors import (
    FieldValidationError,
    InvalidIdentifierError,
    MalformedInputError,
)
from pubky_app_specs.domain.files import Blob, FileMeta, mime_essence


@pytest.fixture
def blob_uri(user_id: str) -> str:
    return f"pubky://{user_id}/pub/pubky.app/blobs/PZBQ010FF079VVZPQG1RNFN6DR"


class TestMimeEssence:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("image/png", "image/png"),
            ("Text/HTML; charset=utf-8", "text/html"),
            ("  application/json  ", "application/json"),
            ("image/svg+xml", "image/svg+xml"),
        ],
    )
    def test_parses(self, raw: str, expected: str) -> None:
        assert mime_essence(raw) == expected

    @pytest.mark.parametrize("raw", ["", "image", "image/", "/png", "not a mime"])
    def test_rejects(self, raw: str) -> None:
        assert mime_essence(raw) is None


class TestFileMeta:
    def test_create_sanitizes(self, blob_uri: str) -> None:
        file = FileMeta.create("  photo.png ", f" {blob_uri} ", " image/png ", 1024)
        assert file.name == "photo.png"
        assert file.src == blob_uri
        assert file.content_type == "image/png"

    def test_crops_name(self, blob_uri: str) -> None:
        assert len(FileMeta.create("n" * 300, blob_uri, "image/png", 1).name) == 255

    def test_invalid_src_cleared(self) -> None:
        assert FileMeta.create("photo.png", "no src", "image/png", 1).src == ""

    def test_valid_file(self, blob_uri: str) -> None:
        file = FileMeta.create("photo.png", blob_uri, "image/png", 1024)
        file.verify(file.create_id(now=file.created_at))

    def test_content_type_parameters_accepted(self, blob_uri: str) -> None:
        FileMeta.create("page.html", blob_uri, "text/html; charset=utf-8", 10).verify()

    def test_empty_name(self, blob_uri: str) -> None:
        with pytest.raises(FieldValidationError, match="Invalid name length"):
            FileMeta.create("   ", blob_uri, "image/png", 1).verify()

    def test_missing_src(self) -> None:
        with pytest.raises(FieldValidationError, match="Invalid src"):
            FileMeta.create("photo.png", "no src", "image/png", 1).verify()

    def test_long_src_unsanitized(self) -> None:
        src = "https://example.com/" + "a" * 1100
        with pytest.raises(FieldValidationError, match="src exceeds maximum length"):
            FileMeta(name="a", created_at=1, src=src, content_type="image/png", size=1).verify()

    def test_unlisted_content_type(self, blob_uri: str) -> None:
        with pytest.raises(FieldValidationError, match="Invalid content type") as exc_info:
            FileMeta.create("photo.heic", blob_uri, "image/heic", 1).verify()
        assert exc_info.value.field == "content_type"

    @pytest.mark.parametrize("size", [0, -1, 10 * MIB + 1])
    def test_size_out_of_range(self, blob_uri: str, size: int) -> None:
        with pytest.raises(FieldValidationError, match="Invalid size"):
            FileMeta.create("photo.png", blob_uri, "image/png", size).verify()

    def test_max_size_accepted(self, blob_uri: str) -> None:
        FileMeta.create("photo.png", blob_uri, "image/png", 10 * MIB).verify()

    def test_hash_id_rejected(self, blob_uri: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            FileMeta.create("photo.png", blob_uri, "image/png", 1).verify(
                "PZBQ010FF079VVZPQG1RNFN6DR"
            )


class TestBlob:
    def test_known_id(self) -> None:
        assert Blob(data=b"\x01\x02").create_id() == "PZBQ010FF079VVZPQG1RNFN6DR"

    def test_id_depends_on_payload(self) -> None:
        assert Blob(data=b"\x01\x02").create_id() != Blob(data=b"\x01\x02\x03").create_id()

    def test_decode_is_verbatim(self) -> None:
        payload = b"\x00\xffnot json"
        blob = Blob.decode(payload)
        assert blob.data == payload
        assert blob.encode() == payload

    def test_decode_rejects_non_bytes(self) -> None:
        with pytest.raises(MalformedInputError):
            Blob.decode("text")  # type: ignore[arg-type]

    def test_to_wire_describes_payload(self) -> None:
        assert Blob(data=b"abc").to_wire() == {"size": 3, "id_scheme": "blake3-full-v1"}

    def test_verify_with_id(self) -> None:
        Blob(data=b"\x01\x02").verify("PZBQ010FF079VVZPQG1RNFN6DR")

    def test_wrong_id(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            Blob(data=b"\x01\x02\x03").verify("PZBQ010FF079VVZPQG1RNFN6DR")

    def test_empty_blob(self) -> None:
        with pytest.raises(FieldValidationError, match="cannot be zero"):
            Blob(data=b"").verify()

    def test_size_checked_before_id(self) -> None:
        with pytest.raises(FieldValidationError):
            Blob(data=b"").verify("PZBQ010FF079VVZPQG1RNFN6DR")

    def test_max_size_boundary(self) -> None:
        Blob(data=bytes(100 * MIB)).verify()
        with pytest.raises(FieldValidationError, match="100MB"):
            Blob(data=bytes(100 * MIB + 1)).verify()

    def test_configured_max_size(self) -> None:
        config = SpecsConfig(blobs=BlobsConfig(max_size=4))
        with pytest.raises(FieldValidationError):
            Blob(data=b"12345").verify(config=config)

    def test_decode_and_validate(self) -> None:
        blob = Blob.decode_and_validate(b"\x01\x02", "PZBQ010FF079VVZPQG1RNFN6DR")
        assert blob.data == b"\x01\x02"
