import pytest

from src.conftest import ADMIN_PASSWORD
from src.rsvp.features.delete_rsvp.router import RSVP_URL, get_rsvp_delete_model
from src.rsvp.tests.inmemory_models import InMemoryRSVPStore, make_rsvp


@pytest.fixture
def rsvp():
    return make_rsvp()


@pytest.fixture
def store(rsvp):
    return InMemoryRSVPStore([rsvp])


@pytest.fixture
def overrides(store):
    return {get_rsvp_delete_model: lambda: store}


@pytest.mark.asyncio
async def test_delete_rsvp(client_factory, overrides, store, rsvp):
    async with client_factory(overrides) as client:
        response = await client.delete(
            RSVP_URL, params={"password": ADMIN_PASSWORD, "id": str(rsvp.id)}
        )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert store.rows == {}


@pytest.mark.asyncio
async def test_delete_rsvp_twice_still_succeeds(client_factory, overrides, rsvp):
    params = {"password": ADMIN_PASSWORD, "id": str(rsvp.id)}

    async with client_factory(overrides) as client:
        await client.delete(RSVP_URL, params=params)
        response = await client.delete(RSVP_URL, params=params)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_rsvp_wrong_password(client_factory, overrides, store, rsvp):
    async with client_factory(overrides) as client:
        response = await client.delete(RSVP_URL, params={"password": "nope", "id": str(rsvp.id)})

    assert response.status_code == 401
    assert rsvp.id in store.rows


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "id_param, error",
    [(None, "RSVP ID required"), ("123", "Invalid RSVP ID")],
)
@pytest.mark.asyncio
async def test_delete_rsvp_bad_id(client_factory, overrides, id_param, error):
    params = {"password": ADMIN_PASSWORD}
    if id_param is not None:
        params["id"] = id_param

    async with client_factory(overrides) as client:
        response = await client.delete(RSVP_URL, params=params)

    assert response.status_code == 400
    assert response.json() == {"error": error}


@pytest.mark.asyncio
async def test_delete_rsvp_store_failure(client_factory, overrides, store, rsvp):
    store.fail = True

    async with client_factory(overrides) as client:
        response = await client.delete(
            RSVP_URL, params={"password": ADMIN_PASSWORD, "id": str(rsvp.id)}
        )

    assert response.status_code == 500
    assert response.json() == {"error": "Database error", "details": "connection refused"}
    assert rsvp.id in store.rows
