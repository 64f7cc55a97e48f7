import asyncio
import re

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from zentro.models.property_images import PropertyImage
from zentro.schemas.image import ImageOptions, ImageResponse
from zentro.services.media_manager import MediaFile, build_storage_path

PROPERTY_ID = 42


def _file(name="living-room.jpg", data=b"jpeg-bytes", content_type="image/jpeg"):
    return MediaFile(name=name, size=len(data), content_type=content_type, data=data)


def _upload(manager, db, file=None, property_id=PROPERTY_ID, options=None):
    return asyncio.run(manager.upload_image(db, file or _file(), property_id, options))


def _boom(*args, **kwargs):
    raise SQLAlchemyError("simulated database failure")


def test_build_storage_path_is_namespaced_by_property():
    path = build_storage_path(7, "kitchen.photo.png")
    assert re.fullmatch(r"7/\d{13}_[0-9a-z]{6}\.png", path)


def test_build_storage_path_without_extension_uses_whole_name():
    assert build_storage_path(7, "README").endswith(".README")


def test_build_storage_path_is_unique_per_call():
    paths = {build_storage_path(1, "a.jpg") for _ in range(50)}
    assert len(paths) == 50


def test_upload_creates_blob_and_row(db_session, media_manager, fake_storage):
    result = _upload(media_manager, db_session)

    assert result.success, result.error
    data = result.data
    assert data.property_id == PROPERTY_ID
    assert data.file_name == "living-room.jpg"
    assert data.file_size == len(b"jpeg-bytes")
    assert data.mime_type == "image/jpeg"
    assert data.alt_text == f"Property image for listing {PROPERTY_ID}"
    assert data.is_primary is False
    assert data.display_order == 0
    assert data.public_url.endswith(f"/property-images/{data.storage_path}")
    assert fake_storage.has("property-images", data.storage_path)

    call = fake_storage.upload_calls[0]
    assert call["cache_control"] == "3600"
    assert call["upsert"] is False
    assert db_session.query(PropertyImage).count() == 1


def test_upload_uses_given_options(db_session, media_manager):
    result = _upload(
        media_manager,
        db_session,
        options=ImageOptions(alt_text="Pool view", is_primary=True, display_order=3),
    )

    assert result.success
    assert result.data.alt_text == "Pool view"
    assert result.data.is_primary is True
    assert result.data.display_order == 3


def test_upload_then_list_includes_new_record(db_session, media_manager):
    uploaded = _upload(media_manager, db_session, file=_file(name="garden.webp", content_type="image/webp"))

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert media.success
    matches = [img for img in media.images if img.id == uploaded.data.id]
    assert len(matches) == 1
    image = matches[0]
    assert image.file_name == "garden.webp"
    assert image.mime_type == "image/webp"
    assert image.storage_path == uploaded.data.storage_path
    assert image.public_url == uploaded.data.public_url


def test_list_for_property_without_images_is_empty_success(db_session, media_manager):
    media = asyncio.run(media_manager.get_property_media(db_session, 999))

    assert media.success
    assert media.images == []


def test_list_orders_by_display_order(db_session, media_manager):
    for order in [2, 0, 1]:
        _upload(
            media_manager,
            db_session,
            file=_file(name=f"img{order}.jpg"),
            options=ImageOptions(display_order=order),
        )

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert [img.display_order for img in media.images] == [0, 1, 2]
    assert [img.file_name for img in media.images] == ["img0.jpg", "img1.jpg", "img2.jpg"]


def test_list_is_scoped_to_property(db_session, media_manager):
    _upload(media_manager, db_session, property_id=1)
    _upload(media_manager, db_session, property_id=2)

    media = asyncio.run(media_manager.get_property_media(db_session, 1))

    assert [img.property_id for img in media.images] == [1]


def test_several_primary_images_are_allowed(db_session, media_manager):
    for _ in range(2):
        _upload(media_manager, db_session, options=ImageOptions(is_primary=True))

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert [img.is_primary for img in media.images] == [True, True]


def test_upload_storage_failure_writes_no_row(db_session, media_manager, fake_storage):
    fake_storage.fail_upload = True

    result = _upload(media_manager, db_session)

    assert result.success is False
    assert result.error_code == "storage_error"
    assert "simulated upload failure" in result.error
    assert result.data is None
    assert db_session.query(PropertyImage).count() == 0


def test_upload_metadata_failure_leaves_orphaned_blob(
    db_session, media_manager, fake_storage, monkeypatch
):
    monkeypatch.setattr(db_session, "commit", _boom)

    result = _upload(media_manager, db_session)

    assert result.success is False
    assert result.error_code == "database_error"
    assert len(fake_storage.upload_calls) == 1
    orphan_path = fake_storage.upload_calls[0]["path"]
    assert fake_storage.has("property-images", orphan_path)
    assert db_session.query(PropertyImage).count() == 0


def test_list_failure_is_reported(db_session, media_manager, monkeypatch):
    monkeypatch.setattr(db_session, "query", _boom)

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert media.success is False
    assert media.error_code == "database_error"
    assert media.images == []


def test_rows_inserted_without_order_or_primary_get_defaults(db_session, media_manager):
    db_session.execute(
        text(
            "INSERT INTO property_images "
            "(property_id, storage_path, file_name, file_size, mime_type) "
            "VALUES (:pid, '42/legacy.jpg', 'legacy.jpg', 10, 'image/jpeg')"
        ),
        {"pid": PROPERTY_ID},
    )
    db_session.commit()

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert media.success, media.error
    assert media.images[0].display_order == 0
    assert media.images[0].is_primary is False


def test_rows_with_null_display_order_are_rejected(db_session):
    db_session.execute(
        text(
            "INSERT INTO property_images "
            "(property_id, storage_path, file_name, file_size, mime_type) "
            "VALUES (:pid, '42/legacy.jpg', 'legacy.jpg', 10, 'image/jpeg')"
        ),
        {"pid": PROPERTY_ID},
    )
    db_session.commit()

    with pytest.raises(IntegrityError):
        db_session.execute(text("UPDATE property_images SET display_order = NULL"))
    db_session.rollback()


def test_unreadable_row_is_reported_not_raised(
    db_session, media_manager, monkeypatch
):
    _upload(media_manager, db_session)

    def bad_row(image):
        return ImageResponse.model_validate({"id": image.id, "display_order": None})

    monkeypatch.setattr(media_manager, "_to_response", bad_row)

    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))

    assert media.success is False
    assert media.error_code == "invalid_row"
    assert media.images == []


def test_delete_removes_blob_and_row(db_session, media_manager, fake_storage):
    uploaded = _upload(media_manager, db_session).data

    result = asyncio.run(media_manager.delete_image(db_session, uploaded.id))

    assert result.success, result.error
    assert not fake_storage.has("property-images", uploaded.storage_path)
    media = asyncio.run(media_manager.get_property_media(db_session, PROPERTY_ID))
    assert uploaded.id not in [img.id for img in media.images]


def test_delete_missing_image_deletes_nothing(db_session, media_manager, fake_storage):
    uploaded = _upload(media_manager, db_session).data

    result = asyncio.run(media_manager.delete_image(db_session, 12345))

    assert result.success is False
    assert result.error_code == "not_found"
    assert result.error == "Image 12345 not found"
    assert fake_storage.has("property-images", uploaded.storage_path)
    assert db_session.query(PropertyImage).count() == 1


def test_delete_storage_failure_keeps_row(db_session, media_manager, fake_storage):
    uploaded = _upload(media_manager, db_session).data
    fake_storage.fail_remove = True

    result = asyncio.run(media_manager.delete_image(db_session, uploaded.id))

    assert result.success is False
    assert result.error_code == "storage_error"
    assert db_session.query(PropertyImage).filter_by(id=uploaded.id).count() == 1


def test_delete_row_failure_leaves_orphaned_row(
    db_session, media_manager, fake_storage, monkeypatch
):
    uploaded = _upload(media_manager, db_session).data
    monkeypatch.setattr(db_session, "commit", _boom)

    result = asyncio.run(media_manager.delete_image(db_session, uploaded.id))

    assert result.success is False
    assert result.error_code == "database_error"
    assert not fake_storage.has("property-images", uploaded.storage_path)
    assert db_session.query(PropertyImage).filter_by(id=uploaded.id).count() == 1


def test_manager_validates_youtube_urls(media_manager):
    valid = media_manager.validate_youtube_url("https://youtu.be/dQw4w9WgXcQ")
    missing = media_manager.validate_youtube_url(None)

    assert valid.is_valid is True
    assert missing.is_valid is False
    assert missing.message == "No URL provided"
