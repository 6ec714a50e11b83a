# quizmaster/catalog/cli.py
import click
from flask import current_app

from ..extensions import db
from ..models import Quiz, Card, Category

SAMPLE_QUIZZES = [
    {
        "name": "Quiz Fruits et Légumes",
        "description": "Associez chaque aliment à sa catégorie correcte.",
        "categories": ["Fruit", "Légume"],
        "cards": ["Orange", "Tomate", "Pomme", "Carotte", "Banane", "Brocoli"],
    },
    {
        "name": "Quiz Animaux",
        "description": "Classifiez les animaux selon leur habitat naturel.",
        "categories": ["Terrestres", "Aquatiques", "Aériens"],
        "cards": ["Lion", "Dauphin", "Aigle", "Éléphant", "Requin", "Faucon"],
    },
]


def seed_sample_quizzes() -> int:
    """Insert the sample quizzes into an empty catalog. Returns how many were created."""
    if db.session.query(Quiz.id).first() is not None:
        return 0

    for sample in SAMPLE_QUIZZES:
        quiz = Quiz(name=sample["name"], description=sample["description"], is_active=True)
        quiz.categories = [Category(name=n) for n in sample["categories"]]
        quiz.cards = [Card(text_description=t) for t in sample["cards"]]
        db.session.add(quiz)

    db.session.commit()
    return len(SAMPLE_QUIZZES)


def register_cli(app):
    @app.cli.command("seed-sample-quizzes")
    def seed_sample_quizzes_command():
        created = seed_sample_quizzes()
        if created:
            current_app.logger.info("Seeded %s sample quizzes", created)
            click.echo(f"OK: {created} sample quizzes inserted")
        else:
            click.echo("Catalog not empty, nothing inserted")
