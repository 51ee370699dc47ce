from httpx import AsyncClient

from tests.helpers import create_location, create_plant, create_vegetable


async def test_create_and_get_plant(client: AsyncClient):
    location = await create_location(client)
    created = await create_plant(
        client,
        "Tomato",
        location_id=location["id"],
        plantedAt="2024-04-20T00:00:00",
        origin="Seed swap",
        icon="🍅",
    )
    assert created["locationId"] == location["id"]
    assert created["origin"] == "Seed swap"

    res = await client.get(f"/plants/{created['id']}")
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Tomato"
    assert data["plantedAt"].startswith("2024-04-20T00:00:00")
    assert data["icon"] == "🍅"
    assert data["Location"]["id"] == location["id"]
    assert data["Vegetables"] == []


async def test_create_plant_requires_name(client: AsyncClient):
    res = await client.post("/plants/new", json={"origin": "Nursery"})
    assert res.status_code == 400
    assert "name" in res.json()["error"]


async def test_create_plant_with_unknown_location(client: AsyncClient):
    res = await client.post("/plants/new", json={"name": "Leek", "locationId": 999})
    assert res.status_code == 404
    assert (await client.get("/plants")).json() == []


async def test_list_plants(client: AsyncClient):
    location = await create_location(client)
    plant = await create_plant(client, "Kale", location_id=location["id"])
    await create_vegetable(client, plant["id"], quantity=2)
    await create_plant(client, "Loose")

    res = await client.get("/plants")
    assert res.status_code == 200
    data = res.json()
    assert [p["name"] for p in data] == ["Kale", "Loose"]
    assert data[0]["Location"]["name"] == location["name"]
    assert len(data[0]["Vegetables"]) == 1
    assert data[1]["Location"] is None


async def test_list_plant_vegetables(client: AsyncClient):
    plant = await create_plant(client)
    early = await create_vegetable(client, plant["id"], harvestedAt="2024-07-01T10:00:00")
    late = await create_vegetable(client, plant["id"], harvestedAt="2024-08-01T10:00:00")

    res = await client.get(f"/plants/{plant['id']}/vegetables")
    assert res.status_code == 200
    assert [v["id"] for v in res.json()] == [late["id"], early["id"]]

    assert (await client.get("/plants/999/vegetables")).status_code == 404


async def test_edit_plant_partial_update(client: AsyncClient):
    location = await create_location(client)
    plant = await create_plant(client, "Squash", location_id=location["id"], origin="Market")

    res = await client.post(f"/plants/{plant['id']}/edit", json={"icon": "🎃"})
    assert res.status_code == 200
    data = res.json()
    assert data["icon"] == "🎃"
    assert data["name"] == "Squash"
    assert data["origin"] == "Market"
    assert data["locationId"] == location["id"]


async def test_edit_plant_keeps_values_on_falsy_input(client: AsyncClient):
    plant = await create_plant(client, "Radish", origin="Garden centre")
    res = await client.post(f"/plants/{plant['id']}/edit", json={"name": "", "origin": None})
    assert res.status_code == 200
    assert res.json()["name"] == "Radish"
    assert res.json()["origin"] == "Garden centre"


async def test_edit_plant_can_clear_location(client: AsyncClient):
    location = await create_location(client)
    plant = await create_plant(client, location_id=location["id"])
    res = await client.post(f"/plants/{plant['id']}/edit", json={"locationId": None})
    assert res.status_code == 200
    assert res.json()["locationId"] is None


async def test_edit_plant_with_unknown_location(client: AsyncClient):
    plant = await create_plant(client)
    res = await client.post(f"/plants/{plant['id']}/edit", json={"locationId": 999})
    assert res.status_code == 404
    assert (await client.get(f"/plants/{plant['id']}")).json()["locationId"] is None


async def test_delete_plant_unlinks_vegetables(client: AsyncClient):
    plant = await create_plant(client)
    vegetable = await create_vegetable(client, plant["id"], quantity=4)

    res = await client.post(f"/plants/{plant['id']}/delete")
    assert res.status_code == 204
    assert (await client.get(f"/plants/{plant['id']}")).status_code == 404

    res = await client.get(f"/vegetables/{vegetable['id']}")
    assert res.status_code == 200
    assert res.json()["plantId"] is None
    assert res.json()["Plant"] is None


async def test_delete_missing_plant(client: AsyncClient):
    res = await client.post("/plants/999/delete")
    assert res.status_code == 404
