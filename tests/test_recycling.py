"""Recycling event ledger and statistics tests."""

import pytest

from src.models import PointCategory, RecyclePoint, RecyclingEvent

API = "/api"


@pytest.fixture
def approved_point(db, auth_headers, categories):
    """An approved point accepting the first two categories."""
    point = RecyclePoint(
        name="Tomberon Kaufland",
        description=None,
        latitude=44.43,
        longitude=26.10,
        user_id=auth_headers.user_id,
        status="approved",
    )
    point.category_links = [
        PointCategory(category_id=categories[0].id),
        PointCategory(category_id=categories[1].id),
    ]
    db.add(point)
    db.commit()
    db.refresh(point)
    return point


def record(client, headers, point_id, category_ids, **extra):
    body = {"pointId": point_id, "categoryIds": category_ids, **extra}
    return client.post(f"{API}/recycling-events", headers=headers, json=body)


def test_record_event_one_row_per_category(client, db, auth_headers, approved_point, categories):
    """Test a batch creates one ledger row per category sharing the quantity."""
    c1, c2 = categories[0].id, categories[1].id
    response = record(client, auth_headers, approved_point.id, [c1, c2], quantity=5)
    assert response.status_code == 201
    assert response.json()["count"] == 2

    events = db.query(RecyclingEvent).order_by(RecyclingEvent.id).all()
    assert [e.category_id for e in events] == [c1, c2]
    assert all(e.quantity == 5 for e in events)
    assert all(e.point_id == approved_point.id for e in events)
    assert all(e.user_id == auth_headers.user_id for e in events)


@pytest.mark.parametrize("quantity", ["abc", -3, 0, None])
def test_record_event_bad_quantity_defaults_to_one(
    client, db, auth_headers, approved_point, categories, quantity
):
    """Test unusable quantities are stored as 1."""
    response = record(
        client, auth_headers, approved_point.id, [categories[0].id], quantity=quantity
    )
    assert response.status_code == 201
    assert db.query(RecyclingEvent).one().quantity == 1


def test_record_event_without_quantity(client, db, auth_headers, approved_point, categories):
    """Test quantity defaults to 1 when omitted."""
    response = record(client, auth_headers, approved_point.id, [categories[0].id])
    assert response.status_code == 201
    assert db.query(RecyclingEvent).one().quantity == 1


def test_record_event_numeric_string_quantity(
    client, db, auth_headers, approved_point, categories
):
    """Test a numeric string quantity is parsed."""
    response = record(client, auth_headers, approved_point.id, [categories[0].id], quantity="4")
    assert response.status_code == 201
    assert db.query(RecyclingEvent).one().quantity == 4


def test_record_event_missing_point(client, auth_headers, categories):
    """Test events need a point."""
    response = client.post(
        f"{API}/recycling-events",
        headers=auth_headers,
        json={"categoryIds": [categories[0].id]},
    )
    assert response.status_code == 400


def test_record_event_empty_categories(client, db, auth_headers, approved_point):
    """Test events need at least one category."""
    response = record(client, auth_headers, approved_point.id, [])
    assert response.status_code == 400
    assert db.query(RecyclingEvent).count() == 0


def test_record_event_requires_auth(client, approved_point, categories):
    """Test anonymous events are rejected."""
    response = client.post(
        f"{API}/recycling-events",
        json={"pointId": approved_point.id, "categoryIds": [categories[0].id]},
    )
    assert response.status_code == 401


def test_record_event_rolls_back_whole_batch(client, db, auth_headers, approved_point, categories):
    """Test one bad category discards every row of the batch."""
    missing_id = max(c.id for c in categories) + 1000
    response = record(
        client, auth_headers, approved_point.id, [categories[0].id, missing_id], quantity=2
    )
    assert response.status_code == 500
    assert db.query(RecyclingEvent).count() == 0


def test_record_event_unknown_point(client, db, auth_headers, categories):
    """Test events must reference an existing point."""
    response = record(client, auth_headers, 999999, [categories[0].id])
    assert response.status_code == 500
    assert db.query(RecyclingEvent).count() == 0


def test_list_recent_events(client, auth_headers, approved_point, categories):
    """Test recent events are joined with names, newest first."""
    record(client, auth_headers, approved_point.id, [categories[0].id], quantity=1)
    record(client, auth_headers, approved_point.id, [categories[1].id], quantity=7)

    response = client.get(f"{API}/recycling-events")
    assert response.status_code == 200
    events = response.json()
    assert len(events) == 2
    assert events[0]["quantity"] == 7
    assert events[0]["category_name"] == "Paper"
    assert events[0]["point_name"] == "Tomberon Kaufland"
    assert events[0]["username"] == auth_headers.username
    assert events[1]["category_name"] == "Plastic"
    assert set(events[0]) == {
        "id",
        "created_at",
        "quantity",
        "point_name",
        "category_name",
        "username",
    }


def test_list_recent_events_category_filter(client, auth_headers, approved_point, categories):
    """Test the category filter on recent events."""
    record(client, auth_headers, approved_point.id, [categories[0].id, categories[1].id])

    response = client.get(f"{API}/recycling-events", params={"category_id": categories[1].id})
    events = response.json()
    assert len(events) == 1
    assert events[0]["category_name"] == "Paper"


def test_list_recent_events_limit(client, db, auth_headers, approved_point, categories):
    """Test at most 200 events are returned."""
    db.add_all(
        [
            RecyclingEvent(
                user_id=auth_headers.user_id,
                point_id=approved_point.id,
                category_id=categories[0].id,
                quantity=1,
            )
            for _ in range(205)
        ]
    )
    db.commit()

    response = client.get(f"{API}/recycling-events")
    assert len(response.json()) == 200


def test_stats_by_point_and_category(client, db, auth_headers, approved_point, categories):
    """Test aggregates match the ledger rows."""
    other = RecyclePoint(
        name="Other",
        latitude=44.0,
        longitude=26.0,
        status="approved",
    )
    other.category_links = [PointCategory(category_id=categories[0].id)]
    db.add(other)
    db.commit()

    both = [categories[0].id, categories[1].id]
    record(client, auth_headers, approved_point.id, both, quantity=3)
    record(client, auth_headers, approved_point.id, [categories[0].id], quantity=2)
    record(client, auth_headers, other.id, [categories[0].id], quantity=10)

    response = client.get(f"{API}/recycling-stats")
    assert response.status_code == 200
    data = response.json()

    by_point = {p["id"]: p for p in data["byPoint"]}
    assert data["byPoint"][0]["id"] == approved_point.id
    assert by_point[approved_point.id]["events_count"] == 3
    assert by_point[approved_point.id]["total_quantity"] == 8
    assert by_point[other.id]["events_count"] == 1
    assert by_point[other.id]["total_quantity"] == 10

    by_category = {c["id"]: c for c in data["byCategory"]}
    assert data["byCategory"][0]["id"] == categories[0].id
    assert by_category[categories[0].id]["events_count"] == 3
    assert by_category[categories[0].id]["total_quantity"] == 15
    assert by_category[categories[1].id]["events_count"] == 1
    assert by_category[categories[1].id]["total_quantity"] == 3


def test_stats_category_filter(client, auth_headers, approved_point, categories):
    """Test the category filter applies to both aggregations."""
    both = [categories[0].id, categories[1].id]
    record(client, auth_headers, approved_point.id, both, quantity=4)

    response = client.get(f"{API}/recycling-stats", params={"category_id": categories[1].id})
    data = response.json()
    assert data["byPoint"] == [
        {
            "id": approved_point.id,
            "name": "Tomberon Kaufland",
            "events_count": 1,
            "total_quantity": 4,
        }
    ]
    assert [c["id"] for c in data["byCategory"]] == [categories[1].id]


def test_stats_empty(client):
    """Test stats with an empty ledger."""
    response = client.get(f"{API}/recycling-stats")
    assert response.json() == {"byPoint": [], "byCategory": []}


def test_submit_moderate_record_scenario(client, auth_headers, admin_headers, categories):
    """Test the full flow from submission through statistics."""
    c1, c2 = categories[0].id, categories[1].id
    response = client.post(
        f"{API}/points",
        headers=auth_headers,
        json={
            "name": "Tomberon Kaufland",
            "description": "",
            "lat": 44.43,
            "lng": 26.10,
            "category_ids": [c1, c2],
        },
    )
    point_id = response.json()["id"]
    assert client.get(f"{API}/points").json() == []

    client.patch(
        f"{API}/admin/points/{point_id}", headers=admin_headers, json={"status": "approved"}
    )
    assert [p["id"] for p in client.get(f"{API}/points").json()] == [point_id]

    response = record(client, auth_headers, point_id, [c1, c2], quantity=3)
    assert response.status_code == 201

    stats = client.get(f"{API}/recycling-stats").json()
    assert stats["byPoint"] == [
        {"id": point_id, "name": "Tomberon Kaufland", "events_count": 2, "total_quantity": 6}
    ]


def test_list_recent_events_without_user(client, db, approved_point, categories):
    """Test ledger rows with no user show a null username."""
    db.add(
        RecyclingEvent(
            user_id=None,
            point_id=approved_point.id,
            category_id=categories[0].id,
            quantity=2,
        )
    )
    db.commit()

    response = client.get(f"{API}/recycling-events")
    assert response.status_code == 200
    events = response.json()
    assert len(events) == 1
    assert events[0]["username"] is None
    assert events[0]["point_name"] == "Tomberon Kaufland"
    assert events[0]["quantity"] == 2
