from django.core.management.base import BaseCommand
from django.db import OperationalError, connection, transaction

from base.enums import ROLE
from base.models import CartModel, ProductInCartModel, ProductModel, ReviewModel, UserModel

class Command(BaseCommand):
    help = "Deletes every user, product, cart and review, leaving an empty database."

    def add_arguments(self, parser):
        parser.add_argument(
            "--keep-admins",
            action="store_true",
            help="Do not delete users with the Admin role.",
        )

    def handle(self, *args, **options):
        try:
            connection.ensure_connection()
            self.stdout.write("Database connection successfully established.")
        except OperationalError as e:
            self.stdout.write(self.style.ERROR(f"Failed to connect to database: {e}"))
            return

        users = UserModel.objects.all()
        if options["keep_admins"]:
            users = users.exclude(role=ROLE.ADMIN.value)

        with transaction.atomic():
            deleted = {
                "reviews": ReviewModel.objects.all().delete()[0],
                "cart products": ProductInCartModel.objects.all().delete()[0],
                "carts": CartModel.objects.all().delete()[0],
                "products": ProductModel.objects.all().delete()[0],
                "users": users.delete()[0],
            }

        for name, count in deleted.items():
            self.stdout.write(f"Deleted {count} {name}")
        self.stdout.write(self.style.SUCCESS("Database cleaned up."))
