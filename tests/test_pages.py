import copy

from portfolio_cms.application.cms.seed_pages import seed_pages
from portfolio_cms.domain.page_content import DEFAULT_ABOUT, DEFAULT_HOME


def test_default_pages_are_seeded(client):
    home = client.get("/api/pages/home").get_json()
    about = client.get("/api/pages/about").get_json()
    contact = client.get("/api/pages/contact").get_json()

    assert home["title"] == "Homepage Content"
    assert home["content"] == DEFAULT_HOME
    assert about["content"] == DEFAULT_ABOUT
    assert contact["content"] == "This is the default contact page content."


def test_seeding_never_overwrites(app, admin_client):
    content = copy.deepcopy(DEFAULT_HOME)
    content["hero"]["headline"] = "Edited"
    admin_client.put("/api/pages/home", json={"title": "Home", "content": content})

    with app.app_context():
        assert seed_pages() == 0

    assert admin_client.get("/api/pages/home").get_json()["content"]["hero"]["headline"] == "Edited"


def test_list_is_admin_only_and_omits_content(client, admin_client):
    assert client.get("/api/pages").status_code == 401

    pages = admin_client.get("/api/pages").get_json()

    assert [p["slug"] for p in pages] == ["home", "about", "contact"]
    assert all(set(p) == {"id", "slug", "title"} for p in pages)


def test_unknown_page_is_not_found(client):
    response = client.get("/api/pages/pricing")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Page not found."}


def test_nested_content_persists_identically(admin_client):
    content = copy.deepcopy(DEFAULT_HOME)
    content["work"]["selectedProjects"] = [3, 1, 2]
    content["snapshot"]["socials"]["email"] = "mailto:me@example.com"
    content["extras"] = {"badges": [{"label": "New", "tones": ["a", "b"]}], "count": 2}

    response = admin_client.put("/api/pages/home", json={"title": "Home", "content": content})

    assert response.get_json() == {"message": "Page updated", "changes": 1}
    stored = admin_client.get("/api/pages/home").get_json()
    assert stored["title"] == "Home"
    assert stored["content"] == content


def test_content_must_match_page_variant(admin_client):
    content = copy.deepcopy(DEFAULT_HOME)
    content["work"]["selectedProjects"] = ["one"]
    assert admin_client.put("/api/pages/home", json={"title": "Home", "content": content}).status_code == 400

    broken = copy.deepcopy(DEFAULT_ABOUT)
    del broken["skills"]
    response = admin_client.put("/api/pages/about", json={"title": "About", "content": broken})
    assert response.status_code == 400
    assert "content.skills" in response.get_json()["message"]

    response = admin_client.put("/api/pages/contact", json={"title": "Contact", "content": {"a": 1}})
    assert response.status_code == 400


def test_contact_page_takes_plain_text(admin_client):
    response = admin_client.put(
        "/api/pages/contact",
        json={"title": "Say hi", "content": "Write me anytime."},
    )

    assert response.get_json()["changes"] == 1
    assert admin_client.get("/api/pages/contact").get_json()["content"] == "Write me anytime."


def test_update_unknown_page_changes_nothing(admin_client):
    response = admin_client.put("/api/pages/pricing", json={"title": "x", "content": {}})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Page updated", "changes": 0}
