import argparse
import sys
from typing import List, Optional

from app.core.config import Settings
from app.core.container import build_container
from app.core.logging import configure_logging
from app.domain.errors import NotFoundError, ValidationError


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Manage third-party API keys stored in the key file.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="Show stored keys with redacted secrets.")
    add = commands.add_parser("add", help="Create or replace the key for a service.")
    add.add_argument("name")
    add.add_argument("service")
    delete = commands.add_parser("delete", help="Delete a key by id, service or legacy alias.")
    delete.add_argument("identifier")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)
    service = build_container(settings).api_key_service

    if args.command == "list":
        records = service.list()
        if not records:
            print("No API keys stored in", settings.api_keys_file)
        for record in records:
            print(f"{record.id}  {record.service:<12} {record.name:<24} {record.key}  {record.created_at}")
        return 0

    if args.command == "add":
        try:
            record = service.create(args.name, args.service)
        except ValidationError as exc:
            print(f"Invalid input: {exc}", file=sys.stderr)
            return 2
        print(f"Created {record.env_var} ({record.id}). Save this key, it won't be shown again:")
        print(record.key)
        return 0

    try:
        removed = service.delete(args.identifier)
    except NotFoundError:
        print(f"API key not found: {args.identifier}", file=sys.stderr)
        return 1
    print(f"Deleted {removed.service} key {removed.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
