import json
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from flashcards.exceptions import SchedulingError
from flashcards.services.cards import bulk_create_cards, create_deck


class Command(BaseCommand):
    help = "Replace all users with demo accounts and seed their decks"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="demo_data.json", help="JSON file name to load decks from"
        )

    def handle(self, *args, **options):
        file_name = options.get("file", "demo_data.json")
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path) as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data from {file_name}: {e}") from e

        with transaction.atomic():
            User.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing user data has been deleted"))

            owner = User.objects.create_superuser(
                "testuser", email="testuser@example.com", password="testpassword"
            )
            for i in range(1, 6):
                User.objects.create_user(
                    f"testuser{i}",
                    email=f"testuser{i}@example.com",
                    password="testpassword",
                )

            created = 0
            try:
                for deck_data in data.get("decks", []):
                    deck = create_deck(
                        owner, deck_data["name"], deck_data.get("description", "")
                    )
                    created += bulk_create_cards(deck, deck_data.get("cards", []))
            except (KeyError, SchedulingError) as e:
                raise CommandError(f"Invalid deck data in {file_name}: {e}") from e

        self.stdout.write(
            self.style.SUCCESS(f"Mock data loaded successfully from {file_name} ({created} cards)")
        )
