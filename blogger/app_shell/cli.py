import argparse
import logging
import sys

from blogger.adapters.clock import SystemClock
from blogger.adapters.sqlite.migrator import SQLiteMigrator
from blogger.adapters.sqlite.repos import SQLitePostRepo
from blogger.api.deps import Settings, get_dispatcher, get_form_factory
from blogger.components.posts import PostController
from blogger.config.loader import load_config
from blogger.domain.errors import BloggerError
from blogger.services.manager import PostManager
from blogger.services.manipulator import PostManipulator

logger = logging.getLogger("cli")


class _CliRouter:
    """Route names are the only location a CLI caller needs."""

    def generate(self, name: str, **params: object) -> str:
        suffix = "".join(f" {key}={value}" for key, value in params.items())
        return f"{name}{suffix}"


def get_controller(settings: Settings) -> PostController:
    config = load_config(settings.config_path)
    repo = SQLitePostRepo(settings.db_path)
    return PostController(
        store=PostManager(repo, max_per_page=config.pagination.max_per_page),
        manipulator=PostManipulator(repo, SystemClock()),
        dispatcher=get_dispatcher(),
        form_factory=get_form_factory(),
        router=_CliRouter(),
        form_name=config.forms.post_form,
        engine=config.engine,
    )


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    migrator = SQLiteMigrator(settings.db_path)
    if args.dry_run:
        pending = migrator.pending_migrations()
        print(f"{len(pending)} pending migration(s)")
        for filename in pending:
            print(f" - {filename}")
        return

    applied = migrator.run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_transition(settings: Settings, args: argparse.Namespace) -> None:
    controller = get_controller(settings)
    if args.command == "publish":
        controller.publish(args.post_id)
    else:
        controller.unpublish(args.post_id)
    print(f"Post {args.post_id}: {args.command} done.")


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("blogger.api.main:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="blogger", description="Blogger backend CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    migrate_parser = subparsers.add_parser("migrate", help="Apply database migrations")
    migrate_parser.add_argument("--dry-run", action="store_true", help="List pending only")

    # publish / unpublish
    for name in ("publish", "unpublish"):
        transition_parser = subparsers.add_parser(name, help=f"{name.capitalize()} a post")
        transition_parser.add_argument("post_id", type=int, help="Post ID")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the backend with uvicorn")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    settings = Settings()

    try:
        if args.command == "migrate":
            handle_migrate(settings, args)
        elif args.command in ("publish", "unpublish"):
            handle_transition(settings, args)
        elif args.command == "serve":
            handle_serve(args)
    except BloggerError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
