from flask import abort, flash, redirect, render_template, request, url_for
from portfolio_cms.application.cms.create_message import create_message
from portfolio_cms.domain.invariants.exceptions import InvariantViolation
from portfolio_cms.models import BlogPost, Page, Project
from portfolio_cms.normalizers.page import normalize_page
from portfolio_cms.normalizers.post import normalize_post
from portfolio_cms.normalizers.project import normalize_project
from . import site_bp


def _page_content(slug, default):
    page = Page.query.filter_by(slug=slug).first()
    if page is None or page.content is None:
        return default
    return normalize_page(page)["content"]


def selected_projects(home_content):
    """Projects picked on the home page, newest year first. Stale ids are skipped."""
    ids = (home_content.get("work") or {}).get("selectedProjects") or []
    if not ids:
        return []

    rows = (
        Project.query.filter(Project.id.in_(ids))
        .order_by(Project.year.desc(), Project.id.desc())
        .all()
    )
    return [normalize_project(p) for p in rows]


@site_bp.route("/", methods=["GET"])
def index():
    content = _page_content("home", {})
    return render_template(
        "site/index.html",
        content=content,
        projects=selected_projects(content),
    )


@site_bp.route("/about", methods=["GET"])
def about():
    return render_template("site/about.html", content=_page_content("about", {}))


@site_bp.route("/contact", methods=["GET"])
def contact():
    return render_template("site/contact.html", content=_page_content("contact", ""))


@site_bp.route("/contact", methods=["POST"])
def submit_contact():
    try:
        create_message(request.form)
    except InvariantViolation as error:
        flash(str(error), "danger")
        return redirect(url_for("site.contact"))

    flash("Thanks! Your message has been sent.", "success")
    return redirect(url_for("site.index"))


@site_bp.route("/projects", methods=["GET"])
def projects():
    rows = Project.query.order_by(Project.year.desc(), Project.id.desc()).all()
    return render_template(
        "site/projects.html",
        projects=[normalize_project(p) for p in rows],
    )


@site_bp.route("/projects/<slug>", methods=["GET"])
def project_detail(slug):
    project = Project.query.filter_by(slug=slug).first()
    if project is None:
        abort(404)

    return render_template("site/project.html", project=normalize_project(project))


@site_bp.route("/blog", methods=["GET"])
def blog():
    rows = BlogPost.query.order_by(BlogPost.date.desc(), BlogPost.id.desc()).all()
    return render_template(
        "site/blog.html",
        posts=[normalize_post(p, include_content=False) for p in rows],
    )


@site_bp.route("/blog/<slug>", methods=["GET"])
def post_detail(slug):
    post = BlogPost.query.filter_by(slug=slug).first()
    if post is None:
        abort(404)

    return render_template("site/post.html", post=normalize_post(post))
