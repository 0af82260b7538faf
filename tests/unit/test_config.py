"""Unit tests for site configuration loading."""

from datetime import timezone

import pytest

from inkwell.utils.config import (
    ConfigError,
    SiteConfig,
    coerce_bool,
    load_site_config,
    resolve_timezone,
)


@pytest.mark.unit
def test_defaults_without_config_file(tmp_path):
    config = load_site_config(tmp_path)

    assert config.site_root == tmp_path
    assert config.permalink == "date"
    assert config.baseurl == ""
    assert config.future is False
    assert config.posts_path == tmp_path / "_posts"
    assert config.tags_page_path == tmp_path / "_site" / "tags" / "index.html"
    assert config.tzinfo == timezone.utc


@pytest.mark.unit
def test_values_from_file(tmp_path):
    (tmp_path / "_config.yml").write_text(
        "title: Notes\n"
        "baseurl: /blog/\n"
        "permalink: pretty\n"
        "date_format: '%b %d, %Y'\n"
        "future: true\n"
        "author: Jo\n"
        "nav: [home, tags]\n"
    )
    config = load_site_config(tmp_path)

    assert config.title == "Notes"
    assert config.baseurl == "/blog"
    assert config.permalink == "pretty"
    assert config.date_format == "%b %d, %Y"
    assert config.future is True
    assert config.extra == {"author": "Jo", "nav": ["home", "tags"]}


@pytest.mark.unit
def test_overrides_take_precedence(tmp_path):
    (tmp_path / "_config.yml").write_text("posts_dir: _posts\n")
    config = load_site_config(tmp_path, posts_dir="content", output_dir=None)

    assert config.posts_dir == "content"
    assert config.output_dir == "_site"


@pytest.mark.unit
def test_empty_file(tmp_path):
    (tmp_path / "_config.yml").write_text("")
    assert load_site_config(tmp_path).title == ""


@pytest.mark.unit
def test_invalid_yaml(tmp_path):
    (tmp_path / "_config.yml").write_text("title: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_top_level_list(tmp_path):
    (tmp_path / "_config.yml").write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_unknown_timezone(tmp_path):
    (tmp_path / "_config.yml").write_text("timezone: Mars/Olympus_Mons\n")
    with pytest.raises(ConfigError, match="Unknown timezone"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_resolve_utc():
    assert resolve_timezone("UTC") is timezone.utc
    assert resolve_timezone("") is timezone.utc


@pytest.mark.unit
def test_site_config_is_a_plain_dataclass(tmp_path):
    config = SiteConfig(site_root=tmp_path, output_dir="public", tags_page="tags.html")
    assert config.tags_page_path == tmp_path / "public" / "tags.html"


@pytest.mark.unit
def test_numeric_timezone_is_a_config_error(tmp_path):
    (tmp_path / "_config.yml").write_text("timezone: 5\n")
    with pytest.raises(ConfigError, match="Unknown timezone '5'"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_unresolvable_interpolation(tmp_path):
    (tmp_path / "_config.yml").write_text("title: ${nope}\n")
    with pytest.raises(ConfigError, match="Cannot resolve"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_quoted_booleans_are_coerced(tmp_path):
    (tmp_path / "_config.yml").write_text('future: "false"\n')
    assert load_site_config(tmp_path).future is False

    (tmp_path / "_config.yml").write_text("future: 'yes'\n")
    assert load_site_config(tmp_path).future is True


@pytest.mark.unit
def test_unrecognized_boolean(tmp_path):
    (tmp_path / "_config.yml").write_text("future: maybe\n")
    with pytest.raises(ConfigError, match="future"):
        load_site_config(tmp_path)


@pytest.mark.unit
def test_scalar_fields_become_strings(tmp_path):
    (tmp_path / "_config.yml").write_text("title: 2019\n")
    assert load_site_config(tmp_path).title == "2019"


@pytest.mark.unit
def test_structured_value_for_string_field(tmp_path):
    (tmp_path / "_config.yml").write_text("title: [a, b]\n")
    with pytest.raises(ConfigError, match="expected a string"):
        load_site_config(tmp_path)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [(None, True), (False, False), ("Off", False), (" TRUE ", True), (0, False)],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value, True) is expected


@pytest.mark.unit
def test_coerce_bool_rejects_unknown_strings():
    with pytest.raises(ValueError):
        coerce_bool("sometimes", False)
