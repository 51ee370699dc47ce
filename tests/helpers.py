from typing import Optional

from httpx import AsyncClient


async def create_location(client: AsyncClient, name: str = "North bed") -> dict:
    res = await client.post("/locations/new", json={"name": name})
    assert res.status_code == 201, res.text
    return res.json()


async def create_plant(client: AsyncClient, name: str = "Tomato", location_id: Optional[int] = None, **fields) -> dict:
    payload = {"name": name, **fields}
    if location_id is not None:
        payload["locationId"] = location_id
    res = await client.post("/plants/new", json=payload)
    assert res.status_code == 201, res.text
    return res.json()


async def create_vegetable(client: AsyncClient, plant_id: int, **fields) -> dict:
    res = await client.post("/vegetables/new", json={"plantId": plant_id, **fields})
    assert res.status_code == 201, res.text
    return res.json()


async def create_treatment(
    client: AsyncClient, location_id: Optional[int], date: str = "2024-05-01T10:00:00", type: str = "neem oil"
) -> dict:
    res = await client.post(
        "/bug-treatments/new", json={"type": type, "date": date, "locationId": location_id}
    )
    assert res.status_code == 201, res.text
    return res.json()
