from flask import jsonify
from portfolio_cms.application.cms.create_entry import create_entry
from portfolio_cms.application.cms.delete_entry import delete_entry
from portfolio_cms.application.cms.update_entry import update_entry
from portfolio_cms.domain.invariants.entry import assert_project
from portfolio_cms.models.project import Project
from portfolio_cms.normalizers.project import normalize_project
from portfolio_cms.utils.decorators import admin_required
from . import api_bp, json_body


def _not_found():
    return jsonify({"message": "Project not found."}), 404


@api_bp.route("/projects", methods=["GET"])
def list_projects():
    projects = Project.query.order_by(Project.year.desc(), Project.id.desc()).all()
    return jsonify([normalize_project(p) for p in projects])


@api_bp.route("/projects/slug/<slug>", methods=["GET"])
def get_project_by_slug(slug):
    project = Project.query.filter_by(slug=slug).first()
    if project is None:
        return _not_found()

    return jsonify(normalize_project(project))


@api_bp.route("/projects/<int:project_id>", methods=["GET"])
@admin_required
def get_project(project_id):
    project = Project.query.filter_by(id=project_id).first()
    if project is None:
        return _not_found()

    return jsonify(normalize_project(project))


@api_bp.route("/projects", methods=["POST"])
@admin_required
def create_project():
    project = create_entry(model=Project, data=json_body(), validate=assert_project)
    return jsonify({"data": {"id": project.id}}), 201


@api_bp.route("/projects/<int:project_id>", methods=["PUT"])
@admin_required
def update_project(project_id):
    changes = update_entry(
        model=Project,
        entry_id=project_id,
        data=json_body(),
        validate=assert_project,
    )
    return jsonify({"message": "updated", "changes": changes}), 200


@api_bp.route("/projects/<int:project_id>", methods=["DELETE"])
@admin_required
def delete_project(project_id):
    changes = delete_entry(model=Project, entry_id=project_id)
    return jsonify({"message": "deleted", "changes": changes}), 200
