API = "/api/v1/locations"


def _create_tag(client, name, **extra):
    response = client.post(f"{API}/tags", json={"name": name, **extra})
    assert response.status_code == 201
    return response.json()


def _create_location(client, name, **extra):
    response = client.post(API, json={"name": name, **extra})
    assert response.status_code == 201
    return response.json()


def test_create_and_read_location(client):
    tag = _create_tag(client, "Login Location")
    parent = _create_location(client, "Main Hospital")
    created = _create_location(
        client, "Outpatient",
        city_village="Kigali",
        parent_uuid=parent["uuid"],
        tag_uuids=[tag["uuid"]],
    )

    response = client.get(f"{API}/{created['uuid']}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Outpatient"
    assert body["city_village"] == "Kigali"
    assert body["parent_uuid"] == parent["uuid"]
    assert [t["name"] for t in body["tags"]] == ["Login Location"]

    parent_body = client.get(f"{API}/{parent['uuid']}").json()
    assert parent_body["child_uuids"] == [created["uuid"]]


def test_read_missing_location_returns_404(client):
    response = client.get(f"{API}/not-a-uuid")
    assert response.status_code == 404


def test_list_and_search_locations(client):
    for name in ["Pharmacy", "Radiology", "physiotherapy"]:
        _create_location(client, name)

    body = client.get(API).json()
    assert body["total_count"] == 3
    assert [loc["name"] for loc in body["locations"]] == ["Pharmacy", "physiotherapy", "Radiology"]

    body = client.get(API, params={"search": "ph"}).json()
    assert [loc["name"] for loc in body["locations"]] == ["Pharmacy", "physiotherapy"]


def test_retired_locations_hidden_by_default(client):
    closed = _create_location(client, "Closed Ward")
    _create_location(client, "Open Ward")

    response = client.post(f"{API}/{closed['uuid']}/retire", json={"reason": "Closed"})
    assert response.status_code == 200
    assert response.json()["retired"] is True

    names = [loc["name"] for loc in client.get(API).json()["locations"]]
    assert names == ["Open Ward"]

    names = [loc["name"] for loc in client.get(API, params={"include_retired": "true"}).json()["locations"]]
    assert names == ["Closed Ward", "Open Ward"]

    names = [loc["name"] for loc in client.get(API, params={"search": "Closed"}).json()["locations"]]
    assert names == []


def test_update_location(client):
    created = _create_location(client, "Lab")

    response = client.put(f"{API}/{created['uuid']}", json={"name": "Laboratory", "country": "Rwanda"})
    assert response.status_code == 200
    assert response.json()["name"] == "Laboratory"
    assert response.json()["country"] == "Rwanda"


def test_update_location_rejects_null_name(client):
    created = _create_location(client, "Lab")

    response = client.put(f"{API}/{created['uuid']}", json={"name": None})
    assert response.status_code == 400


def test_update_location_rejects_self_parent(client):
    created = _create_location(client, "Lab")

    response = client.put(f"{API}/{created['uuid']}", json={"parent_uuid": created["uuid"]})
    assert response.status_code == 400


def test_delete_location(client):
    created = _create_location(client, "Temporary")

    assert client.delete(f"{API}/{created['uuid']}").status_code == 204
    assert client.get(f"{API}/{created['uuid']}").status_code == 404


def test_lang_header_selects_display_name(client):
    created = _create_location(client, "Pharmacy", translations={"fr": "Pharmacie"})

    body = client.get(f"{API}/{created['uuid']}", headers={"lang": "fr-FR"}).json()
    assert body["display_name"] == "Pharmacie"

    body = client.get(API, params={"search": "pharmaci"}, headers={"lang": "fr"}).json()
    assert [loc["uuid"] for loc in body["locations"]] == [created["uuid"]]


def test_invalid_lang_header_returns_400(client):
    response = client.get(API, headers={"lang": "not a locale"})
    assert response.status_code == 400


def test_location_tag_endpoints(client):
    tag = _create_tag(client, "Visit Location", description="Visits happen here")
    _create_tag(client, "Admission Location")

    body = client.get(f"{API}/tags").json()
    assert [t["name"] for t in body["tags"]] == ["Admission Location", "Visit Location"]

    body = client.get(f"{API}/tags", params={"search": "vis"}).json()
    assert [t["uuid"] for t in body["tags"]] == [tag["uuid"]]

    response = client.post(f"{API}/tags/{tag['uuid']}/retire", json={"reason": "Unused"})
    assert response.json()["retired"] is True
    assert [t["name"] for t in client.get(f"{API}/tags").json()["tags"]] == ["Admission Location"]

    assert client.delete(f"{API}/tags/{tag['uuid']}").status_code == 204
    assert client.get(f"{API}/tags/{tag['uuid']}").status_code == 404


def test_create_location_with_unknown_tag_returns_404(client):
    response = client.post(API, json={"name": "Ward", "tag_uuids": ["missing"]})
    assert response.status_code == 404


def test_invalid_translation_locale_returns_400(client):
    response = client.post(API, json={"name": "Ward", "translations": {"not a locale": "x"}})
    assert response.status_code == 400

    response = client.post(f"{API}/tags", json={"name": "Tag", "translations": {"xx-yy-zz": "x"}})
    assert response.status_code == 400


def test_update_location_rejects_descendant_parent(client):
    hospital = _create_location(client, "Hospital")
    ward = _create_location(client, "Ward", parent_uuid=hospital["uuid"])

    response = client.put(f"{API}/{hospital['uuid']}", json={"parent_uuid": ward["uuid"]})
    assert response.status_code == 400
    assert client.get(f"{API}/{hospital['uuid']}").json()["parent_uuid"] is None
