"""
Backend post routes - HTML admin for blog posts.

Each route hands the request to PostController and turns its result into a
response: Redirect becomes a 303 redirect, Render becomes an HTML page.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from blogger.adapters.render.jinja_renderer import JinjaRenderer
from blogger.adapters.routing import StarletteRouter
from blogger.api.deps import (
    get_config,
    get_current_author,
    get_post_controller,
    get_renderer,
    get_router,
)
from blogger.components.posts import ActionResult, FormSubmission, PostController, Redirect
from blogger.components.sorting import PostSorter
from blogger.config.models import BloggerConfig

router = APIRouter()


def _respond(
    result: ActionResult,
    renderer: JinjaRenderer,
    router: StarletteRouter,
) -> Response:
    if isinstance(result, Redirect):
        # 303 so the browser follows up with a GET after a form POST
        return RedirectResponse(result.url, status_code=303)

    html = renderer.render(result.template, {**result.context, "url_for": router.generate})
    return HTMLResponse(html)


def _page_number(page: str | None) -> int:
    """Lenient page parsing; anything unreadable means the first page."""
    try:
        return int(page) if page is not None else 1
    except ValueError:
        return 1


async def _submission(request: Request) -> FormSubmission:
    if request.method == "POST":
        form = await request.form()
        return FormSubmission(method=request.method, data=dict(form))
    return FormSubmission(method=request.method)


@router.get("", name="blogger_backend_post_list")
def list_posts(
    page: str | None = None,
    sort: str | None = None,
    order: str | None = None,
    controller: PostController = Depends(get_post_controller),
    config: BloggerConfig = Depends(get_config),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    """Display table of posts."""
    sorter = PostSorter.from_query(sort, order, config.sorting)
    return _respond(controller.list(sorter, _page_number(page)), renderer, url_router)


@router.api_route("/create", methods=["GET", "POST"], name="blogger_backend_post_create")
async def create_post(
    request: Request,
    controller: PostController = Depends(get_post_controller),
    author: str = Depends(get_current_author),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    submission = await _submission(request)
    return _respond(controller.create(submission, author=author), renderer, url_router)


@router.get("/{post_id}", name="blogger_backend_post_show")
def show_post(
    post_id: int,
    controller: PostController = Depends(get_post_controller),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    return _respond(controller.show(post_id), renderer, url_router)


@router.api_route("/{post_id}/update", methods=["GET", "POST"], name="blogger_backend_post_update")
async def update_post(
    post_id: int,
    request: Request,
    controller: PostController = Depends(get_post_controller),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    submission = await _submission(request)
    return _respond(controller.update(post_id, submission), renderer, url_router)


@router.post("/{post_id}/delete", name="blogger_backend_post_delete")
def delete_post(
    post_id: int,
    controller: PostController = Depends(get_post_controller),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    return _respond(controller.delete(post_id), renderer, url_router)


@router.post("/{post_id}/publish", name="blogger_backend_post_publish")
def publish_post(
    post_id: int,
    controller: PostController = Depends(get_post_controller),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    return _respond(controller.publish(post_id), renderer, url_router)


@router.post("/{post_id}/unpublish", name="blogger_backend_post_unpublish")
def unpublish_post(
    post_id: int,
    controller: PostController = Depends(get_post_controller),
    renderer: JinjaRenderer = Depends(get_renderer),
    url_router: StarletteRouter = Depends(get_router),
) -> Response:
    return _respond(controller.unpublish(post_id), renderer, url_router)
