"""
Page content variants.

Every page slug owns one content shape. ``home`` and ``about`` are nested
documents edited field by field in the admin, ``contact`` is plain text.
"""
from __future__ import annotations

from typing import List, TypedDict, Union


class Hero(TypedDict):
    availability: str
    headline: str
    skills: str


class Socials(TypedDict):
    instagram: str
    linkedin: str
    email: str


class Snapshot(TypedDict):
    role: str
    location: str
    focus: str
    socials: Socials


class Work(TypedDict):
    title: str
    subtitle: str
    selectedProjects: List[int]


class HomeContent(TypedDict):
    hero: Hero
    snapshot: Snapshot
    work: Work


class Experience(TypedDict):
    id: int
    role: str
    company: str
    period: str
    points: str


class Education(TypedDict):
    id: int
    degree: str
    university: str


class Skills(TypedDict):
    technical: List[str]
    soft: List[str]
    tools: List[str]


class AboutContent(TypedDict):
    summary: str
    experiences: List[Experience]
    skills: Skills
    educations: List[Education]


ContactContent = str

PageContent = Union[HomeContent, AboutContent, ContactContent]

PAGE_VARIANTS = {
    "home": HomeContent,
    "about": AboutContent,
    "contact": ContactContent,
}


DEFAULT_HOME: HomeContent = {
    "hero": {
        "availability": "Open to collaborations",
        "headline": "Marketing strategist...",
        "skills": "B2B Marketing, UX Writing",
    },
    "snapshot": {
        "role": "Creative technologist",
        "location": "Tehran, Iran",
        "focus": "Product Design",
        "socials": {"instagram": "#", "linkedin": "#", "email": "#"},
    },
    "work": {
        "title": "Selected Work",
        "subtitle": "Key highlights...",
        "selectedProjects": [],
    },
}

DEFAULT_ABOUT: AboutContent = {
    "summary": "Experienced UI/UX Designer...",
    "experiences": [
        {
            "id": 1,
            "role": "Senior UI/UX Designer...",
            "company": "Ronix Tools",
            "period": "2021 – Present",
            "points": "Spearheaded...",
        }
    ],
    "skills": {
        "technical": ["Design Systems"],
        "soft": ["Empathy"],
        "tools": ["Figma"],
    },
    "educations": [
        {
            "id": 1,
            "degree": "Bachelor of Arts...",
            "university": "Islamic Azad University...",
        }
    ],
}

DEFAULT_CONTACT: ContactContent = "This is the default contact page content."

# (slug, title, content) seeded when missing
DEFAULT_PAGES = (
    ("home", "Homepage Content", DEFAULT_HOME),
    ("about", "About Me", DEFAULT_ABOUT),
    ("contact", "Contact Us", DEFAULT_CONTACT),
)
