"""
Management command to seed development data.

Creates the default pillar and the development user that the Pulse form
and the x-test-user header refer to, plus optional sample posts.
Safe to run repeatedly.
Usage: python manage.py seed_tradeflow [--posts 5] [--require-approval]
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import Role, User
from apps.core.logging import get_logger
from apps.posts.models import Pillar
from apps.posts.services import create_post

logger = get_logger(__name__)

SAMPLE_POSTS = [
    ("maize", 10, 20, "Kano", "White maize, dry and bagged. Ready this week."),
    ("sorghum", 5, None, "Kaduna", "Red sorghum available, can arrange transport."),
    ("soybeans", None, 40, "Benue", "Looking for buyers for clean soybeans."),
]

PULSE_TEMPLATE = {
    "fields": ["commodity", "quantityMin", "quantityMax", "location", "freeText"],
    "style": "text-first",
}


class Command(BaseCommand):
    help = "Seed the default pillar, the development user and sample posts"

    def add_arguments(self, parser):
        parser.add_argument(
            "--pillar",
            type=str,
            default=None,
            help="Pillar slug to create (default: DEFAULT_PILLAR_SLUG setting)",
        )
        parser.add_argument(
            "--user-id",
            type=str,
            default=None,
            help="Development user id (default: DEV_TEST_USER_ID setting)",
        )
        parser.add_argument(
            "--require-approval",
            action="store_true",
            help="New posts in the pillar start PENDING",
        )
        parser.add_argument(
            "--posts",
            type=int,
            default=0,
            help="Number of sample posts to create (default: 0)",
        )

    def handle(self, *args, **options):
        slug = options["pillar"] or settings.DEFAULT_PILLAR_SLUG
        user_id = options["user_id"] or settings.DEV_TEST_USER_ID
        post_count = options["posts"]

        if post_count < 0:
            raise CommandError("--posts must be zero or more")

        pillar, pillar_created = Pillar.objects.get_or_create(
            slug=slug,
            defaults={
                "name": slug.replace("-", " ").title(),
                "description": "Text-first trade posts",
                "template": PULSE_TEMPLATE,
                "require_approval": options["require_approval"],
            },
        )
        if pillar_created:
            self.stdout.write(self.style.SUCCESS(f"Created pillar: {pillar.slug}"))
        else:
            self.stdout.write(self.style.WARNING(f"Pillar already exists: {pillar.slug}"))

        user = User.objects.filter(pk=user_id).first()
        if user is None:
            user = User.objects.create_user(
                email=f"{user_id}@tradeflow.local",
                id=user_id,
                name="Test User",
                role=Role.MEMBER,
            )
            self.stdout.write(self.style.SUCCESS(f"Created user: {user.id}"))
        else:
            self.stdout.write(self.style.WARNING(f"User already exists: {user.id}"))

        for i in range(post_count):
            commodity, qty_min, qty_max, location, text = SAMPLE_POSTS[i % len(SAMPLE_POSTS)]
            post = create_post(
                pillar_slug=pillar.slug,
                author_id=user.id,
                post_type="sell",
                commodity=commodity,
                quantity_min=qty_min,
                quantity_max=qty_max,
                location=location,
                free_text=text,
            )
            self.stdout.write(f"Created post: {post.id} ({post.status})")

        logger.info(
            "seed_completed",
            pillar_slug=pillar.slug,
            user_id=user.id,
            posts_created=post_count,
        )
        self.stdout.write(self.style.SUCCESS("Seed complete."))
