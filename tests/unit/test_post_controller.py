"""
Post controller unit tests.

Lookup, list/show rendering, form-driven create/update, delete, and the
publish/unpublish no-op guard.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from blogger.components.events import PostEventKind
from blogger.components.forms import FormFactory, FormView
from blogger.components.posts import (
    LIST_ROUTE,
    SIGNED_POST_FORM,
    FormSubmission,
    PostController,
    Redirect,
    Render,
)
from blogger.components.sorting import PostSorter
from blogger.domain.entities import Post
from blogger.domain.errors import PostNotFoundError
from blogger.services.manager import PostManager
from blogger.services.manipulator import PostManipulator
from tests.fakes import FakeRouter, InMemoryPostRepo, MockClock

LIST_URL = f"/{LIST_ROUTE}"

VALID_INPUT = {
    "title": "Hello World",
    "slug": "",
    "author": "alice",
    "content": "First post body",
}


# --- Fixtures ---


@pytest.fixture
def manipulator(post_repo: InMemoryPostRepo, clock: MockClock) -> Mock:
    """Real manipulator wrapped so calls can be counted."""
    return Mock(wraps=PostManipulator(post_repo, clock))


@pytest.fixture
def controller(
    post_repo: InMemoryPostRepo,
    manipulator: Mock,
    dispatcher,
    fake_router: FakeRouter,
) -> PostController:
    return PostController(
        store=PostManager(post_repo, max_per_page=2),
        manipulator=manipulator,
        dispatcher=dispatcher,
        form_factory=FormFactory(),
        router=fake_router,
    )


@pytest.fixture
def sorter(config) -> PostSorter:
    return PostSorter.from_query(None, None, config.sorting)


def _add_post(repo: InMemoryPostRepo, **fields) -> Post:
    defaults = {"title": "A post", "slug": "a-post", "author": "bob", "content": "Body"}
    defaults.update(fields)
    return repo.add(Post(**defaults))


# --- Lookup ---


class TestFindPostOr404:
    def test_returns_existing_post(self, controller, post_repo) -> None:
        post = _add_post(post_repo)

        found = controller.find_post_or_404(post.id)

        assert found.id == post.id
        assert found.title == "A post"

    def test_missing_post_raises(self, controller) -> None:
        with pytest.raises(PostNotFoundError) as exc_info:
            controller.find_post_or_404(999)

        assert exc_info.value.post_id == 999


# --- Read actions ---


class TestList:
    def test_renders_first_page(self, controller, post_repo, sorter) -> None:
        for i in range(3):
            _add_post(post_repo, title=f"Post {i}", slug=f"post-{i}")

        result = controller.list(sorter)

        assert isinstance(result, Render)
        assert result.template == "backend/post/list.html"
        assert len(result.context["posts"]) == 2
        assert result.context["paginator"].nb_pages == 2
        assert result.context["sorter"] is sorter

    def test_out_of_range_page_is_clamped(self, controller, post_repo, config) -> None:
        for i in range(3):
            _add_post(post_repo, title=f"Post {i}", slug=f"post-{i}")
        sorter = PostSorter.from_query("title", "asc", config.sorting)

        result = controller.list(sorter, page=50)

        paginator = result.context["paginator"]
        assert paginator.current_page == 2
        assert [p.title for p in result.context["posts"]] == ["Post 2"]

    def test_page_below_one_is_clamped(self, controller, post_repo, sorter) -> None:
        _add_post(post_repo)

        result = controller.list(sorter, page=0)

        assert result.context["paginator"].current_page == 1
        assert len(result.context["posts"]) == 1

    def test_empty_listing(self, controller, sorter, manipulator, recorder) -> None:
        result = controller.list(sorter)

        assert list(result.context["posts"]) == []
        assert manipulator.mock_calls == []
        assert recorder.events == []


class TestShow:
    def test_renders_post(self, controller, post_repo) -> None:
        post = _add_post(post_repo)

        result = controller.show(post.id)

        assert result.template == "backend/post/show.html"
        assert result.context["post"].id == post.id

    def test_missing_post(self, controller) -> None:
        with pytest.raises(PostNotFoundError):
            controller.show(1)

    def test_engine_sets_template_extension(self, post_repo, manipulator, dispatcher) -> None:
        post = _add_post(post_repo)
        controller = PostController(
            store=PostManager(post_repo),
            manipulator=manipulator,
            dispatcher=dispatcher,
            form_factory=FormFactory(),
            router=FakeRouter(),
            engine="jinja2",
        )

        assert controller.show(post.id).template == "backend/post/show.jinja2"


# --- Create ---


class TestCreate:
    def test_get_renders_empty_form(self, controller, manipulator, recorder) -> None:
        result = controller.create(FormSubmission(method="GET"))

        assert isinstance(result, Render)
        assert result.template == "backend/post/create.html"
        assert isinstance(result.context["form"], FormView)
        assert "author" in result.context["form"]
        manipulator.create.assert_not_called()
        assert recorder.events == []

    def test_valid_submission_creates_and_redirects(
        self, controller, post_repo, manipulator, recorder
    ) -> None:
        result = controller.create(FormSubmission(method="POST", data=VALID_INPUT))

        assert result == Redirect(LIST_URL)
        manipulator.create.assert_called_once()
        assert recorder.kinds == ["blogger.post.create"]

        [saved] = post_repo.all()
        assert saved.title == "Hello World"
        assert saved.slug == "hello-world"
        assert saved.author == "alice"

    def test_event_is_dispatched_before_persisting(self, controller, dispatcher) -> None:
        ids_at_dispatch: list[int | None] = []
        dispatcher.add_listener(
            PostEventKind.CREATED,
            lambda event: ids_at_dispatch.append(event.post.id),
        )

        controller.create(FormSubmission(method="POST", data=VALID_INPUT))

        assert ids_at_dispatch == [None]

    def test_invalid_submission_rerenders_without_side_effects(
        self, controller, post_repo, manipulator, recorder
    ) -> None:
        data = {**VALID_INPUT, "title": "   "}

        result = controller.create(FormSubmission(method="POST", data=data))

        assert isinstance(result, Render)
        assert result.template == "backend/post/create.html"
        form = result.context["form"]
        assert form.submitted is True
        assert form.valid is False
        assert "title" in form.errors
        manipulator.create.assert_not_called()
        assert recorder.events == []
        assert post_repo.all() == []

    def test_signed_form_assigns_current_author(
        self, post_repo, manipulator, dispatcher, fake_router
    ) -> None:
        controller = PostController(
            store=PostManager(post_repo),
            manipulator=manipulator,
            dispatcher=dispatcher,
            form_factory=FormFactory(),
            router=fake_router,
            form_name=SIGNED_POST_FORM,
        )
        data = {**VALID_INPUT, "author": "mallory"}

        controller.create(FormSubmission(method="POST", data=data), author="carol")

        [saved] = post_repo.all()
        assert saved.author == "carol"

    def test_author_argument_ignored_when_form_has_author(self, controller, post_repo) -> None:
        controller.create(FormSubmission(method="POST", data=VALID_INPUT), author="carol")

        [saved] = post_repo.all()
        assert saved.author == "alice"


# --- Update ---


class TestUpdate:
    def test_get_renders_prefilled_form(self, controller, post_repo, manipulator) -> None:
        post = _add_post(post_repo, title="Original")

        result = controller.update(post.id, FormSubmission())

        assert result.template == "backend/post/update.html"
        assert result.context["form"]["title"].value == "Original"
        assert result.context["post"].id == post.id
        manipulator.update.assert_not_called()

    def test_valid_submission_redirects_to_show(
        self, controller, post_repo, manipulator, recorder
    ) -> None:
        post = _add_post(post_repo, id=42, title="Original", slug="original")
        data = {**VALID_INPUT, "title": "Renamed", "slug": "original"}

        result = controller.update(42, FormSubmission(method="POST", data=data))

        assert result == Redirect("/blogger_backend_post_show/post_id=42")
        manipulator.update.assert_called_once()
        assert recorder.kinds == ["blogger.post.update"]
        saved = post_repo.get_by_id(post.id)
        assert saved is not None
        assert saved.id == 42
        assert saved.title == "Renamed"

    def test_invalid_submission_leaves_post_unchanged(
        self, controller, post_repo, manipulator, recorder
    ) -> None:
        post = _add_post(post_repo, title="Original")
        data = {**VALID_INPUT, "title": "", "slug": "Not A Slug"}

        result = controller.update(post.id, FormSubmission(method="POST", data=data))

        assert isinstance(result, Render)
        assert set(result.context["form"].errors) == {"title", "slug"}
        assert result.context["post"].title == "Original"
        manipulator.update.assert_not_called()
        assert recorder.events == []
        assert post_repo.get_by_id(post.id).title == "Original"

    def test_unchecked_published_box_unpublishes(self, controller, post_repo) -> None:
        _add_post(post_repo, id=8, slug="a-post")
        controller.publish(8)

        data = {**VALID_INPUT, "slug": "a-post"}
        controller.update(8, FormSubmission(method="POST", data=data))

        saved = post_repo.get_by_id(8)
        assert saved.published is False
        assert saved.published_at is None

    def test_missing_post(self, controller, manipulator) -> None:
        with pytest.raises(PostNotFoundError):
            controller.update(7, FormSubmission(method="POST", data=VALID_INPUT))

        manipulator.update.assert_not_called()


# --- Delete ---


class TestDelete:
    def test_deletes_and_redirects(self, controller, post_repo, manipulator, recorder) -> None:
        post = _add_post(post_repo)

        result = controller.delete(post.id)

        assert result == Redirect(LIST_URL)
        manipulator.delete.assert_called_once()
        assert recorder.kinds == ["blogger.post.delete"]
        assert post_repo.get_by_id(post.id) is None

    def test_missing_post_never_reaches_manipulator(
        self, controller, manipulator, recorder
    ) -> None:
        with pytest.raises(PostNotFoundError):
            controller.delete(404)

        manipulator.delete.assert_not_called()
        assert recorder.events == []


# --- Publish / Unpublish ---


class TestPublish:
    def test_publish_twice_acts_once(self, controller, post_repo, manipulator, recorder) -> None:
        _add_post(post_repo, id=42, published=False)

        first = controller.publish(42)

        assert first == Redirect(LIST_URL)
        manipulator.publish.assert_called_once()
        assert recorder.kinds == ["blogger.post.publish"]
        assert post_repo.get_by_id(42).published is True

        second = controller.publish(42)

        assert second == Redirect(LIST_URL)
        manipulator.publish.assert_called_once()
        assert recorder.kinds == ["blogger.post.publish"]

    def test_unpublish_twice_acts_once(self, controller, post_repo, manipulator, recorder) -> None:
        _add_post(post_repo, id=42, published=True)

        assert controller.unpublish(42) == Redirect(LIST_URL)
        assert controller.unpublish(42) == Redirect(LIST_URL)

        manipulator.unpublish.assert_called_once()
        assert recorder.kinds == ["blogger.post.unpublish"]
        assert post_repo.get_by_id(42).published is False

    def test_unpublish_of_draft_is_noop(self, controller, post_repo, manipulator, recorder) -> None:
        _add_post(post_repo, id=3, published=False)

        assert controller.unpublish(3) == Redirect(LIST_URL)

        manipulator.unpublish.assert_not_called()
        assert recorder.events == []

    def test_publish_missing_post(self, controller, manipulator) -> None:
        with pytest.raises(PostNotFoundError):
            controller.publish(1)

        manipulator.publish.assert_not_called()

    def test_listener_results_are_ignored(self, controller, post_repo, dispatcher) -> None:
        _add_post(post_repo, id=5)
        dispatcher.add_global_listener(lambda event: False)

        assert controller.publish(5) == Redirect(LIST_URL)
        assert post_repo.get_by_id(5).published is True


# --- Failures from collaborators ---


class TestMutationFailure:
    def test_manipulator_errors_propagate(self, post_repo, dispatcher, fake_router) -> None:
        _add_post(post_repo, id=9)
        failing = Mock()
        failing.publish.side_effect = RuntimeError("disk full")
        controller = PostController(
            store=PostManager(post_repo),
            manipulator=failing,
            dispatcher=dispatcher,
            form_factory=FormFactory(),
            router=fake_router,
        )

        with pytest.raises(RuntimeError, match="disk full"):
            controller.publish(9)

