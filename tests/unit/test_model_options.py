from __future__ import annotations

import dataclasses

import pytest

from html2react.model.options import ConversionOptions


def test_defaults() -> None:
    options = ConversionOptions()
    assert options.images_dir == "images-flat"
    assert options.flat_asset_markers == ("images-flat/",)
    assert options.wrapper_tag == "div"
    assert options.custom_var_prefix == "custom-var"
    assert options.normalize is False
    assert options.escape_braces is False


def test_options_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ConversionOptions().wrapper_tag = "section"  # type: ignore[misc]


def test_from_cli_normalizes_values() -> None:
    options = ConversionOptions.from_cli(images_dir="/assets/", wrapper_tag=" Section ", normalize=True)
    assert options.images_dir == "assets"
    assert options.flat_asset_markers == ("assets/",)
    assert options.wrapper_tag == "section"
    assert options.normalize is True


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"images_dir": "a/b"}, "Invalid images directory"),
        ({"images_dir": ""}, "Invalid images directory"),
        ({"wrapper_tag": "1div"}, "Invalid wrapper tag"),
        ({"wrapper_tag": "di v"}, "Invalid wrapper tag"),
        ({"custom_var_prefix": "bad prefix"}, "Invalid custom property class prefix"),
    ],
)
def test_from_cli_rejects_invalid_values(kwargs: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ConversionOptions.from_cli(**kwargs)  # type: ignore[arg-type]


def test_to_dict() -> None:
    assert ConversionOptions().to_dict() == {
        "images_dir": "images-flat",
        "flat_asset_markers": ["images-flat/"],
        "wrapper_tag": "div",
        "custom_var_prefix": "custom-var",
        "normalize": False,
        "escape_braces": False,
    }
