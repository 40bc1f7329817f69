import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from blogger.adapters.clock import SystemClock
from blogger.adapters.render.jinja_renderer import JinjaRenderer
from blogger.adapters.routing import StarletteRouter
from blogger.adapters.sqlite.repos import SQLitePostRepo
from blogger.components.events import EventDispatcher
from blogger.components.forms import FormFactory
from blogger.components.posts import PostController
from blogger.config.loader import load_config
from blogger.config.models import BloggerConfig
from blogger.services.manager import PostManager
from blogger.services.manipulator import PostManipulator
from blogger.shell.hooks.audit_hooks import AuditHooks


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("BLOGGER_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "blogger.db")
        self.config_path = Path(os.environ.get("BLOGGER_CONFIG", self.base_dir / "blogger.yaml"))
        self.auto_migrate = os.environ.get("BLOGGER_AUTO_MIGRATE", "1") not in ("0", "false")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Config ---
@lru_cache
def _load_config_cached(path: Path) -> BloggerConfig:
    return load_config(path)


def get_config(settings: Settings = Depends(get_settings)) -> BloggerConfig:
    return _load_config_cached(settings.config_path)


# --- Repos ---
def get_post_repo(settings: Settings = Depends(get_settings)) -> SQLitePostRepo:
    return SQLitePostRepo(settings.db_path)


# --- Singletons ---
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


_dispatcher_instance: EventDispatcher | None = None


def get_dispatcher() -> EventDispatcher:
    """Get event dispatcher singleton, with the audit trail subscribed."""
    global _dispatcher_instance
    if _dispatcher_instance is None:
        _dispatcher_instance = EventDispatcher()
        AuditHooks().register(_dispatcher_instance)
    return _dispatcher_instance


@lru_cache
def get_form_factory() -> FormFactory:
    return FormFactory()


@lru_cache
def get_renderer() -> JinjaRenderer:
    return JinjaRenderer()


# --- Per-request ---
def get_router(request: Request) -> StarletteRouter:
    return StarletteRouter(request.app.router, request.scope.get("root_path", ""))


def get_current_author(
    request: Request,
    config: BloggerConfig = Depends(get_config),
) -> str:
    """Identity of the requester, as set by the fronting auth proxy."""
    return request.headers.get(config.author.header) or config.author.default


def get_post_controller(
    repo: SQLitePostRepo = Depends(get_post_repo),
    clock: SystemClock = Depends(get_clock),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
    form_factory: FormFactory = Depends(get_form_factory),
    router: StarletteRouter = Depends(get_router),
    config: BloggerConfig = Depends(get_config),
) -> PostController:
    return PostController(
        store=PostManager(repo, max_per_page=config.pagination.max_per_page),
        manipulator=PostManipulator(repo, clock),
        dispatcher=dispatcher,
        form_factory=form_factory,
        router=router,
        form_name=config.forms.post_form,
        engine=config.engine,
    )
