"""
Export a generated entity form definition as JSON.
"""

from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import EntityFormError
from ...generators import EntityFormGenerator


class Command(BaseCommand):
    help = "Export the generated form definition of an entity type as JSON."

    def add_arguments(self, parser):
        parser.add_argument("entity_type", help="Entity type as app_label.ModelName")
        parser.add_argument(
            "--whitelist", nargs="+", default=[], help="Only include these properties"
        )
        parser.add_argument(
            "--blacklist", nargs="+", default=[], help="Exclude these properties"
        )
        parser.add_argument(
            "--email",
            dest="email_properties",
            nargs="+",
            default=[],
            help="Properties rendered as email inputs",
        )
        parser.add_argument(
            "--password",
            dest="password_properties",
            nargs="+",
            default=[],
            help="Properties rendered as password inputs with a repeat field",
        )
        parser.add_argument(
            "--to-one",
            dest="to_one",
            choices=["SELECT", "RADIO"],
            help="Field used for single references",
        )
        parser.add_argument(
            "--to-many",
            dest="to_many",
            choices=["MULTI_SELECT", "MULTI_CHECKBOX"],
            help="Field used for collection references",
        )
        parser.add_argument("--out", dest="out", help="Output file path")

    def handle(self, *args, **options):
        entity_type = options["entity_type"]
        out_path = options.get("out")

        try:
            generator = EntityFormGenerator(
                property_whitelist=options["whitelist"],
                property_blacklist=options["blacklist"],
                email_properties=options["email_properties"],
                password_properties=options["password_properties"],
                to_one_field_choice=options.get("to_one"),
                to_many_field_choice=options.get("to_many"),
            )
            definition = generator.generate(entity_type)
        except EntityFormError as exc:
            raise CommandError(str(exc)) from exc

        payload = json.dumps(definition.to_dict(), default=str, indent=2)

        if out_path:
            with open(out_path, "w", encoding="utf-8") as handle:
                handle.write(payload)
            self.stdout.write(self.style.SUCCESS(f"Wrote form to {out_path}"))
        else:
            self.stdout.write(payload)
