import pytest

CAPTION = {
    "title": "Sunrise over Bromo",
    "story": "We left at 3am and it was worth every minute.",
    "visitedLocation": "Mount Bromo, Indonesia",
    "imageUrl": "http://testserver/uploads/bromo.jpg",
    "visitedDate": "2024-05-01T05:30:00Z",
}


def post_caption(client, headers, **overrides):
    return client.post("/caption", json={**CAPTION, **overrides}, headers=headers)


def list_captions(client, headers):
    response = client.get("/get-caption", headers=headers)
    assert response.status_code == 200
    return response.json()["stories"]


def test_create_caption(client, auth_headers):
    response = post_caption(client, auth_headers)
    assert response.status_code == 201

    body = response.json()
    assert body["error"] is False
    assert body["message"] == "Caption created successfully"
    caption = body["caption"]
    assert caption["title"] == CAPTION["title"]
    assert caption["story"] == CAPTION["story"]
    assert caption["visitedLocation"] == CAPTION["visitedLocation"]
    assert caption["imageUrl"] == CAPTION["imageUrl"]
    assert caption["visitedDate"].startswith("2024-05-01T05:30:00")
    assert caption["isFavourite"] is False
    assert caption["id"]
    assert caption["userId"]
    assert caption["createdOn"]


def test_visited_date_accepts_epoch_milliseconds(client, auth_headers):
    response = post_caption(client, auth_headers, visitedDate=1714541400000)
    assert response.status_code == 201
    assert response.json()["caption"]["visitedDate"].startswith("2024-05-01T05:30:00")


@pytest.mark.parametrize(
    "field", ["title", "story", "visitedLocation", "imageUrl", "visitedDate"]
)
def test_missing_required_field_persists_nothing(client, auth_headers, field):
    payload = {key: value for key, value in CAPTION.items() if key != field}
    response = client.post("/caption", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": True, "message": "All fields are required"}
    assert list_captions(client, auth_headers) == []


@pytest.mark.parametrize("field", ["title", "story", "visitedLocation", "imageUrl"])
def test_empty_required_field_is_missing(client, auth_headers, field):
    response = post_caption(client, auth_headers, **{field: ""})
    assert response.status_code == 400
    assert list_captions(client, auth_headers) == []


def test_unparseable_visited_date(client, auth_headers):
    response = post_caption(client, auth_headers, visitedDate="last summer")
    assert response.status_code == 400
    assert response.json() == {"error": True, "message": "Invalid request data"}
    assert list_captions(client, auth_headers) == []


def test_create_caption_requires_token(client):
    response = client.post("/caption", json=CAPTION)
    assert response.status_code == 401


def test_list_is_favourites_first_in_insertion_order(client, auth_headers):
    for title, favourite in [
        ("one", False),
        ("two", True),
        ("three", False),
        ("four", True),
        ("five", False),
    ]:
        assert post_caption(
            client, auth_headers, title=title, isFavourite=favourite
        ).status_code == 201

    stories = list_captions(client, auth_headers)
    assert [story["title"] for story in stories] == [
        "two",
        "four",
        "one",
        "three",
        "five",
    ]
    assert [story["isFavourite"] for story in stories] == [True, True, False, False, False]


def test_list_only_returns_callers_captions(client, auth_headers, register_user):
    other = register_user("Other", "other@example.com").json()["accessToken"]
    other_headers = {"Authorization": f"Bearer {other}"}

    post_caption(client, auth_headers, title="mine")
    post_caption(client, other_headers, title="theirs")

    mine = list_captions(client, auth_headers)
    theirs = list_captions(client, other_headers)
    assert [story["title"] for story in mine] == ["mine"]
    assert [story["title"] for story in theirs] == ["theirs"]
    assert mine[0]["userId"] != theirs[0]["userId"]
