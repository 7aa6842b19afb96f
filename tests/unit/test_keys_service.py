"""Tests for keys.service."""

from factories import key_row
from keys import schemas, service


async def test_create_forces_active_and_placeholder_creator(fake_db):
    fake_db.queue(key_row(1, name="TEST Key"))

    created = await service.create_key(fake_db, schemas.KeyCreateRequest(name="TEST Key"))

    assert fake_db.calls[0].args == ("TEST Key", 1, True)
    assert created["is_active"] is True
    assert created["created_by"] == 1


async def test_update_forces_active(fake_db):
    fake_db.queue(key_row(3, name="Back door"))

    updated = await service.update_key(fake_db, 3, schemas.KeyUpdateRequest(name="Back door", is_active=False))

    assert fake_db.calls[0].args == ("Back door", True, 3)
    assert updated["is_active"] is True


async def test_update_missing_key_succeeds(fake_db):
    fake_db.queue(None)

    updated = await service.update_key(fake_db, 77, schemas.KeyUpdateRequest(name="Ghost"))

    assert updated["id"] == 77
    assert updated["name"] == "Ghost"


async def test_list_pages(fake_db):
    fake_db.queue([key_row(5)], 21)

    page = await service.list_keys(fake_db, limit=1, offset=4)

    assert fake_db.calls[0].args == (1, 4)
    assert page["totalPages"] == 21
