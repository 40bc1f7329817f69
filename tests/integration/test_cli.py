"""Integration tests for the blogger CLI."""

import pytest

from blogger.adapters.sqlite.repos import SQLitePostRepo
from blogger.app_shell.cli import main
from blogger.domain.entities import Post


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    (tmp_path / "blogger.yaml").write_text("pagination:\n  max_per_page: 5\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BLOGGER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BLOGGER_CONFIG", raising=False)
    return tmp_path


def test_migrate_dry_run_then_apply(workspace, capsys):
    assert main(["migrate", "--dry-run"]) == 0
    assert "1 pending migration(s)" in capsys.readouterr().out

    assert main(["migrate"]) == 0
    assert "Applied 1 migration(s)." in capsys.readouterr().out

    assert main(["migrate"]) == 0
    assert "Applied 0 migration(s)." in capsys.readouterr().out


def test_publish_and_unpublish(workspace, capsys):
    main(["migrate"])
    repo = SQLitePostRepo(str(workspace / "data" / "blogger.db"))
    post = repo.save(Post(title="CLI", slug="cli"))

    assert main(["publish", str(post.id)]) == 0
    assert repo.get_by_id(post.id).published is True

    assert main(["unpublish", str(post.id)]) == 0
    assert repo.get_by_id(post.id).published is False
    assert "unpublish done" in capsys.readouterr().out


def test_missing_post_exits_with_error(workspace):
    main(["migrate"])

    assert main(["publish", "404"]) == 1


def test_missing_config_exits_with_error(workspace):
    main(["migrate"])
    (workspace / "blogger.yaml").unlink()

    assert main(["publish", "1"]) == 1
