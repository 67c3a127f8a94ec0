def normalize_project(project):
    return {
        "id": project.id,
        "slug": project.slug,
        "title": project.title,
        "year": project.year,
        "blurb": project.blurb,
        "tags": project.tags or [],
        "thumbnail": project.thumbnail,
        "images": project.images or [],
        "outcome": project.outcome,
        "challenge": project.challenge,
        "solution": project.solution,
        "content": project.content or [],
    }
