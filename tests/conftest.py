import pytest

from portfolio_cms import create_app
from portfolio_cms.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", {"UPLOAD_FOLDER": str(tmp_path / "uploads")})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    response = client.post("/api/login", json={"username": "sam", "password": "1234"})
    assert response.status_code == 200
    return client


def project_payload(**overrides):
    data = {
        "slug": "brand-refresh",
        "title": "Brand Refresh",
        "year": "2023",
        "blurb": "A new identity for a tool maker.",
        "tags": ["Branding", "UX"],
        "thumbnail": "/uploads/images-1-1.png",
        "images": ["/uploads/images-1-1.png", "/uploads/images-1-2.png"],
        "outcome": "Sales up",
        "challenge": "Dated look",
        "solution": "Design system",
        "content": [
            {"title": "Research", "subtitle": "Week 1", "body": "Interviews", "imageUrl": "/uploads/images-1-3.png"},
            {"title": "Delivery", "subtitle": "", "body": "Rollout", "imageUrl": ""},
        ],
    }
    data.update(overrides)
    return data


def post_payload(**overrides):
    data = {
        "slug": "hello-world",
        "title": "Hello World",
        "date": "2024-03-05",
        "excerpt": "First post.",
        "tags": ["Notes"],
        "content": [{"title": "Intro", "subtitle": "", "body": "Hi there", "imageUrl": ""}],
    }
    data.update(overrides)
    return data


def cookie_cleared(response, name="token"):
    return any(
        header.startswith(f"{name}=;")
        for header in response.headers.getlist("Set-Cookie")
    )
