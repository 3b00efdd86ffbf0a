"""Tests for the repositories and catalog seeding."""

import pytest

from arpreview.db.repositories import (
    CatalogModelRepository,
    FavoriteRepository,
    UserRepository,
)
from arpreview.db.seed import SAMPLE_MODELS, seed_catalog


class TestSeed:
    """Tests for the sample catalog."""

    @pytest.mark.asyncio
    async def test_seed_inserts_samples(self, db_session):
        models = await seed_catalog(db_session)

        assert len(models) == len(SAMPLE_MODELS) == 5
        names = {m.name for m in await CatalogModelRepository(db_session).list_models()}
        assert names == {"Modern Chair", "Coffee Table", "Lamp", "Robot Toy", "Smartphone"}

    @pytest.mark.asyncio
    async def test_reseed_replaces(self, db_session):
        await seed_catalog(db_session)
        await seed_catalog(db_session)

        assert await CatalogModelRepository(db_session).count() == 5

    @pytest.mark.asyncio
    async def test_keep_appends(self, db_session):
        await seed_catalog(db_session)
        await seed_catalog(db_session, replace=False)

        assert await CatalogModelRepository(db_session).count() == 10

    @pytest.mark.asyncio
    async def test_sample_scales(self, db_session):
        await seed_catalog(db_session)
        toys = await CatalogModelRepository(db_session).list_models("Toys")

        assert [m.scale for m in toys] == [0.5]


class TestRepositories:
    """Tests for user, model and favorite persistence."""

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(self, db_session):
        users = UserRepository(db_session)
        await users.create_user(email="Ada@Example.com", name="Ada", password_hash="x")

        user = await users.get_by_email("ADA@example.COM")
        assert user is not None
        assert user.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_default_scale(self, db_session):
        model = await CatalogModelRepository(db_session).create_model(
            name="Lamp", category="Home Decor", model_url="https://x/lamp.glb", thumbnail="https://x/lamp.jpg"
        )
        assert model.scale == 1.0
        assert model.to_dict()["_id"] == model.id

    @pytest.mark.asyncio
    async def test_favorites(self, db_session):
        user = await UserRepository(db_session).create_user(email="a@b.co", name="A", password_hash="x")
        model = (await seed_catalog(db_session))[0]
        favorites = FavoriteRepository(db_session)

        assert not await favorites.exists(user.id, model.id)
        await favorites.add(user.id, model.id)

        assert await favorites.exists(user.id, model.id)
        assert await favorites.get_model_ids(user.id) == [model.id]
        assert [m.id for m in await favorites.get_models(user.id)] == [model.id]

        assert await favorites.remove(user.id, model.id) is True
        assert await favorites.remove(user.id, model.id) is False

    @pytest.mark.asyncio
    async def test_delete_model_cascades_to_favorites(self, db_session):
        user = await UserRepository(db_session).create_user(email="a@b.co", name="A", password_hash="x")
        model = (await seed_catalog(db_session))[0]
        await FavoriteRepository(db_session).add(user.id, model.id)

        assert await CatalogModelRepository(db_session).delete_model(model.id) is True
        assert await FavoriteRepository(db_session).get_model_ids(user.id) == []
