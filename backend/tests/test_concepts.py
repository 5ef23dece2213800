"""Concept create/update/archive/list/get."""

from datetime import datetime

import pytest


async def test_create_applies_defaults(client, alice):
    resp = await client.post("/concepts/", json={"title": "Big-O"}, headers=alice)
    assert resp.status_code == 201
    concept = resp.json()
    assert concept["title"] == "Big-O"
    assert concept["owner_id"] == "user-alice"
    assert concept["difficulty"] == "beginner"
    assert concept["status"] == "draft"
    assert concept["description"] is None
    assert concept["created_at"] == concept["updated_at"]


async def test_create_ignores_owner_in_body(client, alice):
    resp = await client.post("/concepts/", json={"title": "X", "owner_id": "user-bob"}, headers=alice)
    assert resp.json()["owner_id"] == "user-alice"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"title": ""},
        {"title": "   "},
        {"title": "ok", "difficulty": "expert"},
        {"title": "ok", "status": "deleted"},
    ],
)
async def test_create_validation_failures(client, alice, payload):
    resp = await client.post("/concepts/", json=payload, headers=alice)
    assert resp.status_code == 422


async def test_archive_then_republish(client, alice, make_concept):
    concept = await make_concept(title="Big-O")

    archived = await client.post(f"/concepts/{concept['id']}/archive", headers=alice)
    assert archived.status_code == 200
    assert archived.json()["status"] == "archived"

    republished = await client.patch(
        f"/concepts/{concept['id']}", json={"status": "published"}, headers=alice
    )
    assert republished.status_code == 200
    assert republished.json()["status"] == "published"


async def test_update_is_partial(client, alice, make_concept):
    concept = await make_concept(title="Pointers", subject="CS", topic="C")

    resp = await client.patch(f"/concepts/{concept['id']}", json={"topic": "Memory"}, headers=alice)
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["topic"] == "Memory"
    assert updated["subject"] == "CS"
    assert updated["title"] == "Pointers"


async def test_update_with_no_fields_does_not_write(client, alice, make_concept):
    concept = await make_concept()

    resp = await client.patch(f"/concepts/{concept['id']}", json={}, headers=alice)
    assert resp.status_code == 200
    assert resp.json()["updated_at"] == concept["updated_at"]
    assert resp.json() == concept


async def test_update_rejects_null_title(client, alice, make_concept):
    concept = await make_concept()
    resp = await client.patch(f"/concepts/{concept['id']}", json={"title": None}, headers=alice)
    assert resp.status_code == 422


async def test_update_null_clears_optional_text(client, alice, make_concept):
    concept = await make_concept(description="long text")
    resp = await client.patch(
        f"/concepts/{concept['id']}", json={"description": None}, headers=alice
    )
    assert resp.json()["description"] is None


async def test_list_only_returns_own_concepts(client, alice, bob, make_concept):
    mine = await make_concept(title="Mine")
    await make_concept(bob, title="Theirs")

    resp = await client.get("/concepts/", headers=alice)
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == [mine["id"]]


async def test_list_filters_must_all_match(client, alice, make_concept):
    a = await make_concept(title="A", subject="Math", topic="Algebra", status="published")
    await make_concept(title="B", subject="Math", topic="Geometry", status="published")
    await make_concept(title="C", subject="Math", topic="Algebra")

    resp = await client.get(
        "/concepts/",
        params={"subject": "Math", "topic": "Algebra", "status": "published"},
        headers=alice,
    )
    assert [c["id"] for c in resp.json()] == [a["id"]]

    everything = await client.get("/concepts/", headers=alice)
    assert len(everything.json()) == 3


async def test_list_rejects_unknown_status(client, alice):
    resp = await client.get("/concepts/", params={"status": "gone"}, headers=alice)
    assert resp.status_code == 422


async def test_get_with_details(client, alice, make_concept):
    concept = await make_concept()
    cid = concept["id"]
    await client.post(f"/concepts/{cid}/steps/", json={"content": "one"}, headers=alice)
    await client.post(f"/concepts/{cid}/steps/", json={"content": "two"}, headers=alice)
    await client.post(f"/concepts/{cid}/checks/", json={"question": "Why?"}, headers=alice)

    resp = await client.get(f"/concepts/{cid}", headers=alice)
    assert resp.status_code == 200
    detail = resp.json()
    assert detail["concept"]["id"] == cid
    assert [s["content"] for s in detail["steps"]] == ["one", "two"]
    assert [c["question"] for c in detail["checks"]] == ["Why?"]


async def test_get_with_details_empty_children(client, alice, make_concept):
    concept = await make_concept()
    detail = (await client.get(f"/concepts/{concept['id']}", headers=alice)).json()
    assert detail["steps"] == []
    assert detail["checks"] == []


@pytest.mark.parametrize(
    "method, suffix, body",
    [
        ("get", "", None),
        ("patch", "", {"title": "stolen"}),
        ("post", "/archive", None),
    ],
)
async def test_foreign_concept_is_not_found(client, alice, bob, make_concept, method, suffix, body):
    concept = await make_concept(bob)
    resp = await client.request(
        method, f"/concepts/{concept['id']}{suffix}", json=body, headers=alice
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Concept not found."


async def test_missing_concept_is_not_found(client, alice):
    resp = await client.post("/concepts/999/archive", headers=alice)
    assert resp.status_code == 404


async def test_writes_bump_updated_at_but_not_created_at(client, alice, make_concept):
    concept = await make_concept()
    created_at = datetime.fromisoformat(concept["created_at"])
    updated_at = datetime.fromisoformat(concept["updated_at"])

    patched = (
        await client.patch(f"/concepts/{concept['id']}", json={"topic": "Complexity"}, headers=alice)
    ).json()
    assert datetime.fromisoformat(patched["updated_at"]) > updated_at
    assert datetime.fromisoformat(patched["created_at"]) == created_at

    archived = (await client.post(f"/concepts/{concept['id']}/archive", headers=alice)).json()
    assert datetime.fromisoformat(archived["updated_at"]) > datetime.fromisoformat(patched["updated_at"])
    assert datetime.fromisoformat(archived["created_at"]) == created_at
