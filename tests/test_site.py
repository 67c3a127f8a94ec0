import copy

from portfolio_cms.domain.page_content import DEFAULT_HOME

from conftest import post_payload, project_payload


def test_home_shows_hero_and_selected_projects(admin_client, client):
    picked = admin_client.post(
        "/api/projects", json=project_payload(slug="picked", title="Picked Project")
    ).get_json()["data"]["id"]
    admin_client.post("/api/projects", json=project_payload(slug="other", title="Other Project"))

    content = copy.deepcopy(DEFAULT_HOME)
    content["hero"]["headline"] = "Designing calm tools"
    content["work"]["selectedProjects"] = [999, picked]
    admin_client.put("/api/pages/home", json={"title": "Home", "content": content})

    html = client.get("/").get_data(as_text=True)

    assert "Designing calm tools" in html
    assert "Picked Project" in html
    assert "Other Project" not in html


def test_project_detail_and_missing_slug(admin_client, client):
    admin_client.post("/api/projects", json=project_payload())

    html = client.get("/projects/brand-refresh").get_data(as_text=True)
    assert "Brand Refresh" in html
    assert "Research" in html

    assert client.get("/projects/unknown").status_code == 404


def test_blog_lists_posts_with_readable_dates(admin_client, client):
    admin_client.post("/api/posts", json=post_payload())

    html = client.get("/blog").get_data(as_text=True)
    assert "Hello World" in html
    assert "March 05, 2024" in html

    post_html = client.get("/blog/hello-world").get_data(as_text=True)
    assert "Hi there" in post_html


def test_free_text_dates_are_shown_verbatim(admin_client, client):
    admin_client.post("/api/posts", json=post_payload(date="someday soon"))

    assert "someday soon" in client.get("/blog").get_data(as_text=True)


def test_about_and_contact_render_page_content(client):
    assert "Ronix Tools" in client.get("/about").get_data(as_text=True)
    assert "default contact page content" in client.get("/contact").get_data(as_text=True)


def test_contact_form_stores_message(client, admin_client):
    response = client.post(
        "/contact",
        data={"projectDescription": "A shop", "contactInfo": "me@example.com"},
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    messages = admin_client.get("/api/messages").get_json()
    assert messages[0]["project_description"] == "A shop"


def test_incomplete_contact_form_redirects_back(client):
    response = client.post("/contact", data={"projectDescription": "A shop"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/contact")


def test_home_lists_selected_projects_newest_year_first(admin_client, client):
    older = admin_client.post(
        "/api/projects", json=project_payload(slug="older", title="Older Work", year="2019")
    ).get_json()["data"]["id"]
    newer = admin_client.post(
        "/api/projects", json=project_payload(slug="newer", title="Newer Work", year="2024")
    ).get_json()["data"]["id"]

    content = copy.deepcopy(DEFAULT_HOME)
    content["work"]["selectedProjects"] = [older, newer]
    admin_client.put("/api/pages/home", json={"title": "Home", "content": content})

    html = client.get("/").get_data(as_text=True)

    assert html.index("Newer Work") < html.index("Older Work")
