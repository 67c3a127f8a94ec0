def normalize_page(page, include_content=True):
    data = {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
    }

    if include_content:
        data["content"] = page.content

    return data
