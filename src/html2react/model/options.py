"""Conversion options for html2react.

Defaults reproduce the layout produced by the asset pipeline: images live in a
flat ``images-flat/`` directory next to the generated component, and the body
element is replaced by a ``<div>`` wrapper.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_TAG_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")
_CLASS_PREFIX_RE = re.compile(r"^[A-Za-z_-][A-Za-z0-9_-]*$")
_DIR_NAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")


@dataclass(frozen=True)
class ConversionOptions:
    """Configuration for a single HTML-to-JSX conversion."""

    # Directory (relative to the component) that holds flattened images
    images_dir: str = "images-flat"

    # Path markers after which the remainder of a src is the image filename
    flat_asset_markers: tuple[str, ...] = ("images-flat/",)

    # Element that replaces <body> when the body carries attributes
    wrapper_tag: str = "div"

    # Prefix for class names minted for inline CSS custom properties
    custom_var_prefix: str = "custom-var"

    # Run the regex attribute clean-up over the finished JSX
    normalize: bool = False

    # Write braces in text as {'{'} / {'}'} instead of leaving them raw
    escape_braces: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        images_dir: str = "images-flat",
        wrapper_tag: str = "div",
        custom_var_prefix: str = "custom-var",
        normalize: bool = False,
        escape_braces: bool = False,
    ) -> ConversionOptions:
        """Build ConversionOptions from CLI argument values.

        Args:
            images_dir: Flat image directory name used in import paths
            wrapper_tag: Tag used to wrap body content
            custom_var_prefix: Prefix for generated custom property classes
            normalize: Whether to run the post-pass attribute clean-up
            escape_braces: Whether to escape braces in text nodes

        Returns:
            ConversionOptions instance

        Raises:
            ValueError: If any argument has an invalid value
        """
        images_dir = images_dir.strip().strip("/")
        if not _DIR_NAME_RE.match(images_dir):
            raise ValueError(
                f"Invalid images directory '{images_dir}'. "
                "Use a single directory name without path separators."
            )

        wrapper_tag = wrapper_tag.strip().lower()
        if not _TAG_NAME_RE.match(wrapper_tag):
            raise ValueError(f"Invalid wrapper tag '{wrapper_tag}'.")

        if not _CLASS_PREFIX_RE.match(custom_var_prefix):
            raise ValueError(f"Invalid custom property class prefix '{custom_var_prefix}'.")

        return cls(
            images_dir=images_dir,
            flat_asset_markers=(f"{images_dir}/",),
            wrapper_tag=wrapper_tag,
            custom_var_prefix=custom_var_prefix,
            normalize=normalize,
            escape_braces=escape_braces,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging."""
        return {
            "images_dir": self.images_dir,
            "flat_asset_markers": list(self.flat_asset_markers),
            "wrapper_tag": self.wrapper_tag,
            "custom_var_prefix": self.custom_var_prefix,
            "normalize": self.normalize,
            "escape_braces": self.escape_braces,
        }


__all__ = ["ConversionOptions"]
