from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from database import get_db
from main import app
from models import Employee


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def api(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _seed(session_factory, *employees):
    async with session_factory() as session:
        session.add_all(employees)
        await session.commit()
        return [e.id for e in employees]


@pytest.mark.asyncio
async def test_crud_lifecycle(api):
    created = await api.post("/employees", json={"firstName": "Mahmoud", "middleName": "Ali", "lastName": "Elgendi"})
    assert created.status_code == 201
    new_id = created.json()["id"]
    assert new_id > 0

    location = created.headers["location"]
    fetched = await api.get(location)
    assert fetched.status_code == 200
    assert fetched.json() == {"id": new_id, "firstName": "Mahmoud", "middleName": "Ali", "lastName": "Elgendi"}

    updated = await api.put(f"/employees/{new_id}", json={"id": new_id, "firstName": "Mahmoud", "lastName": "Elgendy"})
    assert updated.status_code == 204
    assert (await api.get(f"/employees/{new_id}")).json()["lastName"] == "Elgendy"
    assert (await api.get(f"/employees/{new_id}")).json()["middleName"] is None

    assert (await api.delete(f"/employees/{new_id}")).status_code == 204
    assert (await api.delete(f"/employees/{new_id}")).status_code == 400
    assert (await api.get(f"/employees/{new_id}")).status_code == 404


@pytest.mark.asyncio
async def test_list_matches_stored_rows(api, session_factory):
    await _seed(
        session_factory,
        Employee(first_name="Mahmoud", middle_name="Ali", last_name="Elgendi"),
        Employee(first_name="Omar", middle_name="Fuad", last_name="Tameemi"),
    )

    response = await api.get("/employees")

    assert response.status_code == 200
    assert [e["firstName"] for e in response.json()] == ["Mahmoud", "Omar"]


@pytest.mark.asyncio
async def test_update_keeps_salary_and_manager(api, session_factory):
    boss_id, = await _seed(session_factory, Employee(first_name="Boss", last_name="One"))
    worker_id, = await _seed(
        session_factory,
        Employee(first_name="Omar", last_name="Tameemi", salary=Decimal("4200.50"), manager_id=boss_id),
    )

    response = await api.put(f"/employees/{worker_id}", json={"id": worker_id, "firstName": "Omer", "lastName": "Tameemi"})
    assert response.status_code == 204

    async with session_factory() as session:
        worker = await session.get(Employee, worker_id)
    assert worker.first_name == "Omer"
    assert worker.salary == Decimal("4200.50")
    assert worker.manager_id == boss_id

    manager = await api.get(f"/employees/{worker_id}/manager")
    assert manager.json()["id"] == boss_id


@pytest.mark.asyncio
async def test_update_unknown_id_is_accepted_without_effect(api):
    response = await api.put("/employees/77", json={"id": 77, "firstName": "Ghost", "lastName": "Row"})

    assert response.status_code == 204
    assert (await api.get("/employees/77")).status_code == 404


@pytest.mark.asyncio
async def test_deleting_manager_detaches_reports(api, session_factory):
    boss_id, = await _seed(session_factory, Employee(first_name="Boss", last_name="One"))
    worker_id, = await _seed(session_factory, Employee(first_name="Omar", last_name="Tameemi", manager_id=boss_id))

    assert [r["id"] for r in (await api.get(f"/employees/{boss_id}/reports")).json()] == [worker_id]
    assert (await api.delete(f"/employees/{boss_id}")).status_code == 204

    assert (await api.get(f"/employees/{worker_id}/manager")).status_code == 404
    assert (await api.get(f"/employees/{worker_id}")).status_code == 200


@pytest.mark.asyncio
async def test_overlong_name_is_rejected_before_storage(api):
    response = await api.post("/employees", json={"firstName": "x" * 51, "lastName": "Elgendi"})

    assert response.status_code == 422
    assert (await api.get("/employees")).json() == []


@pytest.mark.asyncio
async def test_id_beyond_integer_range_is_treated_as_missing(api):
    huge = 99999999999999999999

    assert (await api.get(f"/employees/{huge}")).status_code == 404
    assert (await api.delete(f"/employees/{huge}")).status_code == 400
    assert (await api.get(f"/employees/{huge}/manager")).status_code == 404
    response = await api.put(f"/employees/{huge}", json={"id": huge, "firstName": "A", "lastName": "B"})
    assert response.status_code == 204
