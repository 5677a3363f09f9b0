import textwrap

import pytest

from MarkdownRuns.model import FontWeight, Style, StyleConfiguration
from MarkdownRuns.style_config import configuration_from_dict, load_configuration


def test_load_yaml_overrides():
    yaml_text = textwrap.dedent(
        """
        h1:
          font_size: 30
        listPrefix:
          fontWeight: light
        codeBlock:
          isItalic: true
          size: 9.5
        """
    )
    config = load_configuration(yaml_text)
    assert config.h1 == Style(font_size=30, weight=FontWeight.BOLD)
    assert config.list_prefix.weight is FontWeight.LIGHT
    assert config.code_block == Style(font_size=9.5, italic=True)
    assert config.h2 == StyleConfiguration().h2


def test_empty_yaml_gives_defaults():
    assert load_configuration("") == StyleConfiguration()
    assert load_configuration("h1:\n") == StyleConfiguration()


def test_weight_is_case_insensitive():
    assert configuration_from_dict({"text": {"weight": "Bold"}}).text.weight is FontWeight.BOLD


@pytest.mark.parametrize(
    "yaml_text",
    [
        "- h1\n- h2",
        "footer: {font_size: 10}",
        "h1: {weight: heavy}",
        "h1: {font_size: -1}",
        "h1: {font_size: big}",
        "h1: {font_size: true}",
        "h1: {font_size: .inf}",
        "h1: {font_size: .nan}",
        "h2: {color: red}",
        "italic: {italic: maybe}",
        "text: 12",
    ],
)
def test_invalid_configuration(yaml_text):
    with pytest.raises(ValueError):
        load_configuration(yaml_text)
