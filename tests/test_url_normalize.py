"""Tests for repository URL parsing."""

import pytest

from repository.url_normalize import parse_repo_url


class TestParseRepoUrl:
    """Recognized and rejected repository URL shapes."""

    @pytest.mark.parametrize("url", [
        "git+https://github.com/ljharb/left-pad.git",
        "https://github.com/ljharb/left-pad",
        "http://github.com/ljharb/left-pad.git",
        "HTTPS://GitHub.com/ljharb/left-pad.GIT",
    ])
    def test_accepts_supported_shapes(self, url):
        ref = parse_repo_url(url)

        assert ref is not None
        assert ref.owner == "ljharb"
        assert ref.repo == "left-pad"
        assert ref.host == "github.com"

    def test_keeps_dots_inside_repo_name(self):
        ref = parse_repo_url("git+https://github.com/socketio/socket.io.git")

        assert ref.owner == "socketio"
        assert ref.repo == "socket.io"

    def test_ignores_trailing_path_and_fragment(self):
        ref = parse_repo_url("https://github.com/babel/babel/tree/main/packages/babel-core#readme")

        assert (ref.owner, ref.repo) == ("babel", "babel")

    @pytest.mark.parametrize("url", [
        None,
        "",
        "git://github.com/ljharb/left-pad.git",
        "git+ssh://git@github.com/ljharb/left-pad.git",
        "github:ljharb/left-pad",
        "ljharb/left-pad",
        "https://gitlab.com/ljharb/left-pad",
        "https://github.com/ljharb",
    ])
    def test_rejects_other_shapes(self, url):
        assert parse_repo_url(url) is None

    def test_host_override(self):
        ref = parse_repo_url("https://git.example.com/team/tool.git", host="git.example.com")

        assert (ref.owner, ref.repo) == ("team", "tool")
