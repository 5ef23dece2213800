"""Step upsert/delete under an owned concept."""


async def test_insert_applies_defaults(client, alice, make_concept):
    concept = await make_concept()
    resp = await client.post(
        f"/concepts/{concept['id']}/steps/", json={"content": "intro text"}, headers=alice
    )
    assert resp.status_code == 200
    step = resp.json()
    assert step["concept_id"] == concept["id"]
    assert step["step_number"] == 1
    assert step["step_type"] == "other"
    assert step["content"] == "intro text"


async def test_resave_replaces_instead_of_merging(client, alice, make_concept):
    concept = await make_concept()
    url = f"/concepts/{concept['id']}/steps/"
    first = (
        await client.post(
            url,
            json={"content": "intro text", "step_number": 3, "step_type": "intuition", "heading": "Why"},
            headers=alice,
        )
    ).json()

    resp = await client.post(url, json={"id": first["id"], "content": "revised"}, headers=alice)
    assert resp.status_code == 200
    step = resp.json()
    assert step["id"] == first["id"]
    assert step["content"] == "revised"
    assert step["step_number"] == 1
    assert step["step_type"] == "other"
    assert step["heading"] is None

    detail = (await client.get(f"/concepts/{concept['id']}", headers=alice)).json()
    assert len(detail["steps"]) == 1


async def test_step_numbers_need_not_be_unique(client, alice, make_concept):
    concept = await make_concept()
    url = f"/concepts/{concept['id']}/steps/"
    for content in ("a", "b"):
        resp = await client.post(url, json={"content": content, "step_number": 2}, headers=alice)
        assert resp.status_code == 200


async def test_save_validation(client, alice, make_concept):
    concept = await make_concept()
    url = f"/concepts/{concept['id']}/steps/"
    assert (await client.post(url, json={"content": ""}, headers=alice)).status_code == 422
    assert (await client.post(url, json={"content": "x", "step_number": 0}, headers=alice)).status_code == 422
    assert (await client.post(url, json={"content": "x", "step_type": "joke"}, headers=alice)).status_code == 422


async def test_save_on_foreign_concept_is_not_found(client, alice, bob, make_concept):
    concept = await make_concept(bob)
    resp = await client.post(
        f"/concepts/{concept['id']}/steps/", json={"content": "sneaky"}, headers=alice
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Concept not found."


async def test_cannot_move_step_between_concepts(client, alice, make_concept):
    source = await make_concept(title="Source")
    target = await make_concept(title="Target")
    step = (
        await client.post(f"/concepts/{source['id']}/steps/", json={"content": "x"}, headers=alice)
    ).json()

    resp = await client.post(
        f"/concepts/{target['id']}/steps/", json={"id": step["id"], "content": "moved"}, headers=alice
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Step not found."


async def test_save_with_unknown_id_is_not_found(client, alice, make_concept):
    concept = await make_concept()
    resp = await client.post(
        f"/concepts/{concept['id']}/steps/", json={"id": 12345, "content": "x"}, headers=alice
    )
    assert resp.status_code == 404


async def test_archived_concept_still_accepts_steps(client, alice, make_concept):
    concept = await make_concept()
    await client.post(f"/concepts/{concept['id']}/archive", headers=alice)
    resp = await client.post(
        f"/concepts/{concept['id']}/steps/", json={"content": "late"}, headers=alice
    )
    assert resp.status_code == 200


async def test_delete_returns_row_then_not_found(client, alice, make_concept):
    concept = await make_concept()
    step = (
        await client.post(f"/concepts/{concept['id']}/steps/", json={"content": "x"}, headers=alice)
    ).json()
    url = f"/concepts/{concept['id']}/steps/{step['id']}"

    first = await client.delete(url, headers=alice)
    assert first.status_code == 200
    assert first.json()["id"] == step["id"]

    second = await client.delete(url, headers=alice)
    assert second.status_code == 404
    assert second.json()["detail"] == "Step not found."


async def test_delete_under_wrong_concept_is_not_found(client, alice, make_concept):
    source = await make_concept(title="Source")
    other = await make_concept(title="Other")
    step = (
        await client.post(f"/concepts/{source['id']}/steps/", json={"content": "x"}, headers=alice)
    ).json()

    resp = await client.delete(f"/concepts/{other['id']}/steps/{step['id']}", headers=alice)
    assert resp.status_code == 404

    detail = (await client.get(f"/concepts/{source['id']}", headers=alice)).json()
    assert [s["id"] for s in detail["steps"]] == [step["id"]]


async def test_delete_on_foreign_concept_is_not_found(client, alice, bob, make_concept):
    concept = await make_concept(bob)
    step = (
        await client.post(f"/concepts/{concept['id']}/steps/", json={"content": "x"}, headers=bob)
    ).json()
    resp = await client.delete(f"/concepts/{concept['id']}/steps/{step['id']}", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Concept not found."
