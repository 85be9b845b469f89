"""Configuration models for Image Transformer."""

from dataclasses import dataclass, fields
from typing import Iterable, Self

OPTION_NAMES = ("invert", "flip_horizontal", "flip_vertical", "grayscale")


@dataclass(frozen=True)
class TransformConfig:
    """Options enabled for a single transform run.

    All sixteen combinations are valid. Instances are frozen, so two configs
    with the same flags compare equal and hash the same, which lets callers
    cache results by flag combination.

    Attributes:
        invert: Invert the RGB channels (default: True, like the upload page).
        flip_horizontal: Mirror pixels across the vertical axis.
        flip_vertical: Mirror pixels across the horizontal axis.
        grayscale: Replace RGB with the pixel's luminance.
    """

    invert: bool = True
    flip_horizontal: bool = False
    flip_vertical: bool = False
    grayscale: bool = False

    @classmethod
    def from_options(cls, names: Iterable[str]) -> Self:
        """Create config with exactly the named options enabled.

        Args:
            names: Option names, e.g. ["flip_horizontal", "grayscale"].

        Returns:
            TransformConfig with every other option disabled.

        Raises:
            ValueError: If a name is not a known option.

        Examples:
            >>> TransformConfig.from_options(["grayscale"])
            TransformConfig(invert=False, flip_horizontal=False, flip_vertical=False, grayscale=True)
        """
        enabled = set(names)
        unknown = enabled.difference(OPTION_NAMES)
        if unknown:
            raise ValueError(
                f"Unknown option(s): {', '.join(sorted(unknown))}. "
                f"Expected any of: {', '.join(OPTION_NAMES)}"
            )
        return cls(**{name: name in enabled for name in OPTION_NAMES})

    @property
    def enabled_options(self) -> tuple[str, ...]:
        """Names of the enabled options, in canonical order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name))

    @property
    def is_identity(self) -> bool:
        return not self.enabled_options

    @property
    def needs_color_pass(self) -> bool:
        return self.invert or self.grayscale

    def validate(self) -> list[str]:
        """Check the configuration and return warnings.

        Returns:
            List of warning messages. Empty if the options are fine.
        """
        warnings = []
        if self.is_identity:
            warnings.append(
                "No transforms are enabled. The output will be identical to the input."
            )
        return warnings
