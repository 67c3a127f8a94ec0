import os
import random
import time
from flask import current_app
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename

UPLOAD_URL_PREFIX = "/uploads/"


def build_upload_name(field, filename):
    """<field>-<epoch ms>-<random>.<ext>, keeping the original extension."""
    suffix = secure_filename(os.path.splitext(filename or "")[1].lstrip("."))
    ext = f".{suffix}" if suffix else ""
    return f"{field}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def save_file(file, field):
    upload_folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_folder, exist_ok=True)

    unique_filename = build_upload_name(field, file.filename)
    file.save(os.path.join(upload_folder, unique_filename))

    return f"{UPLOAD_URL_PREFIX}{unique_filename}"


def local_path(file_url):
    """Map a public /uploads/ URL to its file, None if it points elsewhere."""
    if not file_url or not file_url.startswith(UPLOAD_URL_PREFIX):
        return None

    return safe_join(
        current_app.config["UPLOAD_FOLDER"],
        file_url[len(UPLOAD_URL_PREFIX):],
    )


def delete_file(file_url):
    """
    Deletes the file behind a public upload URL.
    Returns True when a file was removed.
    """
    file_path = local_path(file_url)
    if not file_path or not os.path.exists(file_path):
        return False

    try:
        os.remove(file_path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {file_path}: {e}")
        return False


def collect_upload_paths(value):
    """Every /uploads/ URL found anywhere inside a JSON-like value."""
    found = set()

    if isinstance(value, str):
        if value.startswith(UPLOAD_URL_PREFIX):
            found.add(value)
    elif isinstance(value, dict):
        for item in value.values():
            found |= collect_upload_paths(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            found |= collect_upload_paths(item)

    return found


def row_upload_paths(row):
    return collect_upload_paths(
        [getattr(row, column.name) for column in row.__table__.columns]
    )


def referenced_upload_paths():
    from portfolio_cms.models import BlogPost, Page, Project

    referenced = set()
    for model in (Project, BlogPost, Page):
        for row in model.query.all():
            referenced |= row_upload_paths(row)
    return referenced


def prune_orphans(candidates):
    """
    Delete the candidate uploads no project, post or page points to
    anymore. Returns the URLs that were removed.
    """
    if not candidates or not current_app.config.get("PRUNE_ORPHAN_UPLOADS"):
        return []

    orphaned = set(candidates) - referenced_upload_paths()
    removed = sorted(url for url in orphaned if delete_file(url))

    if removed:
        current_app.logger.info(f"Pruned orphaned uploads: {', '.join(removed)}")

    return removed
