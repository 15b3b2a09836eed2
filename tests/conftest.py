"""
Shared fixtures: sample projects in the persistence layer's shape.

Parts, chapters, paragraphs and notions are deliberately out of order so
every test exercises the composer's sorting.
"""

from datetime import datetime

import pytest

from manuscript.models import Chapter, Notion, Owner, Paragraph, Part, Project


@pytest.fixture
def owner():
    return Owner(firstname="Ada", lastname="Martin", email="ada@example.com")


@pytest.fixture
def sample_project(owner):
    """
    Two parts (given as 2, 1); part 1 has two chapters (given as 2, 1).

    Expected reading order:
        Partie 1: Origines
            Chapitre 1: Départ   (para 1: notions 1, 2; para 2)
            Chapitre 2: Voyage
        Partie 2: Suite
            Chapitre 1: Retour
    """
    depart = Chapter(number=1, title="Départ", paragraphs=[
        Paragraph(name="Clôture", number=2, notions=[
            Notion(name="Fin", number=1, content="Fin du chapitre."),
        ]),
        Paragraph(name="Ouverture", number=1, notions=[
            Notion(name="Barré", number=2, content="~~rayé~~"),
            Notion(name="Scène", number=1, content="Il **partit** à l'aube"),
        ]),
    ])
    voyage = Chapter(number=2, title="Voyage", paragraphs=[
        Paragraph(name="Route", number=1, notions=[
            Notion(name="Route", number=1, content="La route était __longue__."),
        ]),
    ])
    retour = Chapter(number=1, title="Retour", paragraphs=[
        Paragraph(name="Maison", number=1, notions=[
            Notion(name="Maison", number=1, content="<p>Enfin <strong>chez lui</strong>.</p>"),
        ]),
    ])

    return Project(
        name="Mon roman",
        owner=owner,
        created_at=datetime(2024, 3, 5, 10, 0),
        parts=[
            Part(number=2, title="Suite", chapters=[retour]),
            Part(number=1, title="Origines", intro="Où tout *commence*.",
                 chapters=[voyage, depart]),
        ],
    )


@pytest.fixture
def empty_project(owner):
    return Project(name="Vide", owner=owner, created_at=datetime(2024, 1, 2))


@pytest.fixture
def project_payload():
    """Project JSON as the persistence layer sends it"""
    return {
        "pr_name": "Mon roman",
        "description": "Un essai",
        "owner": {"firstname": "Ada", "lastname": "Martin", "email": "ada@example.com"},
        "created_at": "2024-03-05T10:00:00Z",
        "parts": [
            {
                "part_number": 2,
                "part_title": "Suite",
                "chapters": [],
            },
            {
                "part_number": 1,
                "part_title": "Origines",
                "part_intro": "Où tout commence.",
                "chapters": [{
                    "chapter_number": 1,
                    "chapter_title": "Départ",
                    "paragraphs": [{
                        "para_name": "Ouverture",
                        "para_number": 1,
                        "notions": [{
                            "notion_name": "Scène",
                            "notion_number": 1,
                            "notion_content": "Il **partit**",
                        }],
                    }],
                }],
            },
        ],
    }
