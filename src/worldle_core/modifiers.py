"""Difficulty modifiers: hidden country image and randomly rotated image."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ModifierMode:
    """Persistent ``enabled`` setting plus a round-local ``temp_disabled`` override."""

    enabled: bool = False
    temp_disabled: bool = False

    @property
    def active(self) -> bool:
        return self.enabled and not self.temp_disabled

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_temp_disabled(self, temp_disabled: bool = True) -> None:
        self.temp_disabled = temp_disabled


@dataclass(slots=True)
class Modifiers:
    hide_image: ModifierMode = field(default_factory=ModifierMode)
    rotation: ModifierMode = field(default_factory=ModifierMode)

    @classmethod
    def from_flags(cls, *, no_image_mode: bool, rotation_mode: bool) -> Modifiers:
        return cls(hide_image=ModifierMode(enabled=no_image_mode), rotation=ModifierMode(enabled=rotation_mode))

    def reset_temp_disabled_on_win(self) -> None:
        """Restore both modifiers for the next round without touching ``enabled``."""
        self.hide_image.temp_disabled = False
        self.rotation.temp_disabled = False

    def image_hidden(self, game_ended: bool) -> bool:
        return self.hide_image.active and not game_ended

    def rotation_applied(self, game_ended: bool) -> bool:
        return self.rotation.active and not game_ended

    def can_reveal_image(self, game_ended: bool) -> bool:
        return self.image_hidden(game_ended)

    def can_cancel_rotation(self, game_ended: bool) -> bool:
        # Rotation can only be cancelled once the image is visible.
        return self.rotation_applied(game_ended) and not self.hide_image.active
