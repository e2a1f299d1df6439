"""Seed roles, permissions, their grants and an optional super admin."""

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from access_control.models import Permission, Role
from authentication.managers import UserManager

ACTIONS = ("CREATE", "READ", "UPDATE", "DELETE")
RESOURCES = (
    "USER",
    "ROLE",
    "PERMISSION",
    "GROUP",
    "ARTICLE",
    "BOOK",
    "RESEARCH",
    "CATEGORY",
    "TAG",
    "ATTACHMENT",
)
CONTENT_RESOURCES = ("ARTICLE", "BOOK", "RESEARCH", "CATEGORY", "TAG", "ATTACHMENT")

ROLE_DESCRIPTIONS = {
    "SUPER_ADMIN": "Full access to every resource",
    "ADMIN": "Administers users and content",
    "EDITOR": "Manages content",
    "USER": "Read-only access",
}


def permission_names() -> list[str]:
    return [f"{action}_{resource}" for resource in RESOURCES for action in ACTIONS]


def role_grants() -> dict[str, set[str]]:
    """Permission names granted to each seeded role."""
    everything = set(permission_names())
    reads = {name for name in everything if name.startswith("READ_")}
    content = {f"{action}_{resource}" for resource in CONTENT_RESOURCES for action in ACTIONS}
    return {
        "SUPER_ADMIN": everything,
        "ADMIN": everything,
        "EDITOR": content | reads,
        "USER": reads,
    }


def create_seed_permissions() -> dict[str, Permission]:
    """Create every ``<ACTION>_<RESOURCE>`` permission and return a name->Permission map."""
    permissions = {}
    for name in permission_names():
        action, resource = name.split("_", 1)
        permission, _ = Permission.objects.get_or_create(
            name=name,
            defaults={"description": f"{action.title()} {resource.lower()}"},
        )
        permissions[name] = permission
    return permissions


def create_seed_roles() -> dict[str, Role]:
    """Create base roles if missing and return a name->Role map."""
    roles = {}
    for name, description in ROLE_DESCRIPTIONS.items():
        role, _ = Role.objects.get_or_create(name=name, defaults={"description": description})
        roles[name] = role
    return roles


def assign_seed_permissions(roles: dict[str, Role], permissions: dict[str, Permission]) -> None:
    for role_name, granted in role_grants().items():
        roles[role_name].permissions.add(*(permissions[name] for name in sorted(granted)))


def seed_rbac() -> tuple[dict[str, Role], dict[str, Permission]]:
    roles = create_seed_roles()
    permissions = create_seed_permissions()
    assign_seed_permissions(roles, permissions)
    return roles, permissions


class Command(BaseCommand):
    """Management command to seed RBAC roles and permissions."""

    help = (
        "Seed RBAC roles and permissions, plus a SUPER_ADMIN user when "
        "SUPER_ADMIN_USERNAME/EMAIL/PASSWORD are set. Use --reset to clear "
        "previously seeded roles and permissions first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the seeded roles and permissions before running the seeder.",
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if options.get("reset"):
                self._reset_seeded_data()

            self.stdout.write("Seeding RBAC data...")
            roles, permissions = seed_rbac()
            self.stdout.write(f"{len(roles)} roles, {len(permissions)} permissions.")
            self._create_super_admin(roles["SUPER_ADMIN"])
        self.stdout.write(self.style.SUCCESS("RBAC seed completed."))

    def _reset_seeded_data(self) -> None:
        self.stdout.write("Resetting previously seeded RBAC data...")
        Role.objects.filter(name__in=ROLE_DESCRIPTIONS).delete()
        Permission.objects.filter(name__in=permission_names()).delete()
        self.stdout.write(self.style.WARNING("Seeded RBAC data cleared."))

    def _create_super_admin(self, role: Role) -> None:
        username = os.environ.get("SUPER_ADMIN_USERNAME")
        email = os.environ.get("SUPER_ADMIN_EMAIL")
        password = os.environ.get("SUPER_ADMIN_PASSWORD")
        if not (username and email and password):
            self.stdout.write("SUPER_ADMIN_* not set; skipping super admin user.")
            return

        User = get_user_model()
        user, created = User.objects.get_or_create(
            username=username,
            defaults={
                "email": email,
                "full_name": "Super Admin",
                "password_hash": UserManager.hash_password(password),
            },
        )
        user.roles.add(role)
        state = "created" if created else "already present"
        self.stdout.write(f"Super admin '{username}' {state}.")
