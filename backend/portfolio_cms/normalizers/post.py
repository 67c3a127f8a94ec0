def normalize_post(post, include_content=True):
    data = {
        "id": post.id,
        "slug": post.slug,
        "title": post.title,
        "date": post.date,
        "excerpt": post.excerpt,
        "tags": post.tags or [],
    }

    if include_content:
        data["content"] = post.content or []

    return data
