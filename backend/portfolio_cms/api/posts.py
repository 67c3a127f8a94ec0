from flask import jsonify
from portfolio_cms.application.cms.create_entry import create_entry
from portfolio_cms.application.cms.delete_entry import delete_entry
from portfolio_cms.application.cms.update_entry import update_entry
from portfolio_cms.domain.invariants.entry import assert_post
from portfolio_cms.models.blog_post import BlogPost
from portfolio_cms.normalizers.post import normalize_post
from portfolio_cms.utils.decorators import admin_required
from . import api_bp, json_body


def _not_found():
    return jsonify({"message": "Post not found."}), 404


@api_bp.route("/posts", methods=["GET"])
def list_posts():
    # Listing is a summary; the sections come with the single-post reads
    posts = BlogPost.query.order_by(BlogPost.date.desc(), BlogPost.id.desc()).all()
    return jsonify([normalize_post(p, include_content=False) for p in posts])


@api_bp.route("/posts/slug/<slug>", methods=["GET"])
def get_post_by_slug(slug):
    post = BlogPost.query.filter_by(slug=slug).first()
    if post is None:
        return _not_found()

    return jsonify(normalize_post(post))


@api_bp.route("/posts/<int:post_id>", methods=["GET"])
@admin_required
def get_post(post_id):
    post = BlogPost.query.filter_by(id=post_id).first()
    if post is None:
        return _not_found()

    return jsonify(normalize_post(post))


@api_bp.route("/posts", methods=["POST"])
@admin_required
def create_post():
    post = create_entry(model=BlogPost, data=json_body(), validate=assert_post)
    return jsonify({"data": {"id": post.id}}), 201


@api_bp.route("/posts/<int:post_id>", methods=["PUT"])
@admin_required
def update_post(post_id):
    changes = update_entry(
        model=BlogPost,
        entry_id=post_id,
        data=json_body(),
        validate=assert_post,
    )
    return jsonify({"message": "updated", "changes": changes}), 200


@api_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@admin_required
def delete_post(post_id):
    changes = delete_entry(model=BlogPost, entry_id=post_id)
    return jsonify({"message": "deleted", "changes": changes}), 200
