from flask import jsonify
from portfolio_cms.application.cms.update_page import update_page as replace_page
from portfolio_cms.models.page import Page
from portfolio_cms.normalizers.page import normalize_page
from portfolio_cms.utils.decorators import admin_required
from . import api_bp, json_body


@api_bp.route("/pages", methods=["GET"])
@admin_required
def list_pages():
    pages = Page.query.order_by(Page.id.asc()).all()
    return jsonify([normalize_page(p, include_content=False) for p in pages])


@api_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    page = Page.query.filter_by(slug=slug).first()
    if page is None:
        return jsonify({"message": "Page not found."}), 404

    return jsonify(normalize_page(page))


@api_bp.route("/pages/<slug>", methods=["PUT"])
@admin_required
def update_page(slug):
    changes = replace_page(slug=slug, data=json_body())
    return jsonify({"message": "Page updated", "changes": changes}), 200
