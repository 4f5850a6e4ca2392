"""Tests for kickstart.core.models module."""

import pytest

from kickstart.core.models import NpmClient, ProbeResults, ProjectContext


class TestProjectContext:
    """Tests for ProjectContext."""

    def test_root_defaults_to_target(self, tmp_path):
        context = ProjectContext(target=tmp_path / "app")
        assert context.project_root == tmp_path / "app"
        assert context.in_monorepo is False

    def test_for_target_without_monorepo(self, tmp_path):
        context = ProjectContext.for_target(tmp_path / "app", None)
        assert context.project_root == context.target

    def test_for_target_in_monorepo(self, tmp_path):
        context = ProjectContext.for_target(tmp_path / "packages" / "app", tmp_path)
        assert context.in_monorepo is True
        assert context.project_root == tmp_path

    def test_root_must_be_ancestor(self, tmp_path):
        with pytest.raises(ValueError):
            ProjectContext(target=tmp_path / "a", in_monorepo=True, project_root=tmp_path / "b")


class TestProbeResults:

    def test_in_monorepo(self, tmp_path):
        assert ProbeResults(monorepo_root=tmp_path).in_monorepo is True
        assert ProbeResults().in_monorepo is False

    def test_author(self):
        assert ProbeResults(username="Jane", email="j@x.io").author == "Jane <j@x.io>"
        assert ProbeResults(username="Jane").author == ""


class TestGenerationParameters:

    def test_is_pnpm8(self, make_params):
        assert make_params(npm_client_major=8).is_pnpm8 is True
        assert make_params(npm_client_major=9).is_pnpm8 is False
        assert make_params(npm_client=NpmClient.YARN, npm_client_major=8).is_pnpm8 is False
