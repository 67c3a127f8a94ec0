from flask import current_app, jsonify, request
from portfolio_cms.domain.invariants.exceptions import InvariantViolation
from portfolio_cms.utils.decorators import admin_required
from portfolio_cms.utils.media import save_file
from . import api_bp


@api_bp.route("/upload", methods=["POST"])
@admin_required
def upload_files():
    field = current_app.config["UPLOAD_FIELD"]
    limit = current_app.config["MAX_UPLOAD_FILES"]

    unexpected = [name for name in request.files if name != field]
    if unexpected:
        raise InvariantViolation(f"Unexpected file field '{unexpected[0]}'.")

    files = [f for f in request.files.getlist(field) if f.filename]
    if not files:
        raise InvariantViolation(f"No files provided in field '{field}'.")

    if len(files) > limit:
        raise InvariantViolation(f"At most {limit} files can be uploaded at once.")

    paths = [save_file(f, field) for f in files]

    current_app.logger.info(f"Stored {len(paths)} upload(s)")

    return jsonify({"message": "Files uploaded successfully", "paths": paths}), 200
