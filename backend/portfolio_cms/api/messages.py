from flask import jsonify
from portfolio_cms.application.cms.create_message import create_message as store_message
from portfolio_cms.application.cms.delete_entry import delete_entry
from portfolio_cms.models.message import Message
from portfolio_cms.normalizers.message import normalize_message
from portfolio_cms.utils.decorators import admin_required
from . import api_bp, json_body


@api_bp.route("/messages", methods=["POST"])
def create_message():
    message = store_message(json_body())
    return jsonify({"success": True, "id": message.id}), 201


@api_bp.route("/messages", methods=["GET"])
@admin_required
def list_messages():
    messages = Message.query.order_by(
        Message.submitted_at.desc(), Message.id.desc()
    ).all()
    return jsonify([normalize_message(m) for m in messages])


@api_bp.route("/messages/<int:message_id>", methods=["DELETE"])
@admin_required
def delete_message(message_id):
    changes = delete_entry(model=Message, entry_id=message_id)
    return jsonify({"message": "deleted", "changes": changes}), 200
