from httpx import AsyncClient

from tests.helpers import create_plant, create_vegetable


async def test_create_and_get_vegetable(client: AsyncClient):
    plant = await create_plant(client, "Carrot")
    created = await create_vegetable(
        client, plant["id"], rating=4, quantity=12, harvestedAt="2024-09-02T17:30:00"
    )
    assert created["plantId"] == plant["id"]

    res = await client.get(f"/vegetables/{created['id']}")
    assert res.status_code == 200
    data = res.json()
    assert data["rating"] == 4
    assert data["quantity"] == 12
    assert data["harvestedAt"].startswith("2024-09-02T17:30:00")
    assert data["Plant"]["name"] == "Carrot"


async def test_create_vegetable_requires_plant(client: AsyncClient):
    res = await client.post("/vegetables/new", json={"rating": 3})
    assert res.status_code == 400
    assert "plantId" in res.json()["error"]
    assert (await client.get("/vegetables")).json() == []


async def test_create_vegetable_with_unknown_plant(client: AsyncClient):
    res = await client.post("/vegetables/new", json={"plantId": 999, "quantity": 1})
    assert res.status_code == 404
    assert res.json() == {"error": "Plant not found"}


async def test_list_vegetables_includes_plant(client: AsyncClient):
    plant = await create_plant(client, "Onion")
    await create_vegetable(client, plant["id"], quantity=5)
    await create_vegetable(client, plant["id"], quantity=6)

    res = await client.get("/vegetables")
    assert res.status_code == 200
    data = res.json()
    assert [v["quantity"] for v in data] == [5, 6]
    assert all(v["Plant"]["name"] == "Onion" for v in data)


async def test_edit_rating_preserves_other_fields(client: AsyncClient):
    plant = await create_plant(client)
    vegetable = await create_vegetable(
        client, plant["id"], rating=2, quantity=7, harvestedAt="2024-06-05T12:00:00"
    )

    res = await client.post(f"/vegetables/{vegetable['id']}/edit", json={"rating": 5})
    assert res.status_code == 200
    data = res.json()
    assert data["rating"] == 5
    assert data["quantity"] == 7
    assert data["harvestedAt"] == vegetable["harvestedAt"]
    assert data["plantId"] == plant["id"]


async def test_edit_quantity_accepts_zero(client: AsyncClient):
    plant = await create_plant(client)
    vegetable = await create_vegetable(client, plant["id"], quantity=7)

    res = await client.post(f"/vegetables/{vegetable['id']}/edit", json={"quantity": 0})
    assert res.status_code == 200
    assert res.json()["quantity"] == 0


async def test_edit_ignores_null_harvest_date(client: AsyncClient):
    plant = await create_plant(client)
    vegetable = await create_vegetable(client, plant["id"], harvestedAt="2024-06-05T12:00:00")

    res = await client.post(f"/vegetables/{vegetable['id']}/edit", json={"harvestedAt": None})
    assert res.status_code == 200
    assert res.json()["harvestedAt"] == vegetable["harvestedAt"]


async def test_edit_moves_vegetable_to_other_plant(client: AsyncClient):
    first = await create_plant(client, "First")
    second = await create_plant(client, "Second")
    vegetable = await create_vegetable(client, first["id"])

    res = await client.post(f"/vegetables/{vegetable['id']}/edit", json={"plantId": second["id"]})
    assert res.status_code == 200
    assert res.json()["plantId"] == second["id"]

    res = await client.post(f"/vegetables/{vegetable['id']}/edit", json={"plantId": 999})
    assert res.status_code == 404


async def test_delete_vegetable(client: AsyncClient):
    plant = await create_plant(client)
    vegetable = await create_vegetable(client, plant["id"])

    res = await client.post(f"/vegetables/{vegetable['id']}/delete")
    assert res.status_code == 204
    assert (await client.get(f"/vegetables/{vegetable['id']}")).status_code == 404
    assert (await client.post(f"/vegetables/{vegetable['id']}/delete")).status_code == 404
    assert (await client.get(f"/plants/{plant['id']}")).status_code == 200
