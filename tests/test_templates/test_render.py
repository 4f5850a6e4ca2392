"""Tests for kickstart.templates bundled templates."""

import json

import pytest

from kickstart.core.models import AppTemplate
from kickstart.errors import TemplateError
from kickstart.templates import get_available_templates, render


@pytest.fixture
def data():
    return {
        "version": "^4.3.0",
        "npmClient": "pnpm",
        "registry": "https://registry.npmmirror.com/",
        "author": "Jane <jane@example.com>",
        "email": "jane@example.com",
        "withHusky": True,
        "extraNpmrc": "",
        "pluginName": "umi-plugin-foo",
    }


class TestRender:
    """Tests for render()."""

    @pytest.mark.parametrize("template", list(AppTemplate))
    def test_every_template_renders(self, tmp_path, data, template):
        target = tmp_path / "out"
        render(template, target, data)

        package = json.loads((target / "package.json").read_text())
        assert package["author"] == "Jane <jane@example.com>"
        assert (target / ".npmrc").exists()
        assert (target / ".gitignore").exists()
        assert (target / ".husky" / "pre-commit").exists()

    def test_npmrc_registry(self, tmp_path, data):
        render(AppTemplate.APP, tmp_path, data)
        assert (tmp_path / ".npmrc").read_text() == "registry=https://registry.npmmirror.com/\n"

    def test_npmrc_extra_line(self, tmp_path, data):
        data["extraNpmrc"] = "strict-peer-dependencies=false"
        render(AppTemplate.APP, tmp_path, data)
        lines = (tmp_path / ".npmrc").read_text().splitlines()
        assert lines == [
            "registry=https://registry.npmmirror.com/",
            "strict-peer-dependencies=false",
        ]

    def test_husky_fields_only_when_kept(self, tmp_path, data):
        data["withHusky"] = False
        render(AppTemplate.APP, tmp_path, data)
        package = json.loads((tmp_path / "package.json").read_text())
        assert "prepare" not in package["scripts"]
        assert "husky" not in package["devDependencies"]

    def test_npm_client_in_umirc(self, tmp_path, data):
        data["npmClient"] = "yarn"
        render(AppTemplate.APP, tmp_path, data)
        assert "npmClient: 'yarn'" in (tmp_path / ".umirc.ts").read_text()

    def test_max_uses_umijs_max(self, tmp_path, data):
        render(AppTemplate.MAX, tmp_path, data)
        package = json.loads((tmp_path / "package.json").read_text())
        assert package["dependencies"]["@umijs/max"] == "^4.3.0"
        assert package["scripts"]["dev"] == "max dev"
        assert package["scripts"]["prepare"] == "husky"

    def test_vue_app_preset(self, tmp_path, data):
        render(AppTemplate.VUE_APP, tmp_path, data)
        package = json.loads((tmp_path / "package.json").read_text())
        assert "@umijs/preset-vue" in package["dependencies"]
        assert (tmp_path / "src" / "pages" / "index.vue").exists()

    def test_plugin_name(self, tmp_path, data):
        render(AppTemplate.PLUGIN, tmp_path, data)
        package = json.loads((tmp_path / "package.json").read_text())
        assert package["name"] == "umi-plugin-foo"
        assert "key: 'umi-plugin-foo'" in (tmp_path / "src" / "index.ts").read_text()

    def test_accepts_string_id(self, tmp_path, data):
        render("vue-app", tmp_path, data)
        assert (tmp_path / "package.json").exists()

    def test_unknown_template(self, tmp_path, data):
        with pytest.raises(TemplateError, match="Unknown template"):
            render("svelte", tmp_path, data)

    def test_write_failure(self, tmp_path, data):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(TemplateError):
            render(AppTemplate.APP, blocker, data)


def test_available_templates():
    assert list(get_available_templates()) == ["app", "max", "vue-app", "plugin"]
