"""Theme registry: saved palettes, presets, and the runtime style block.

Saved themes are whole documents (no merge). Applying a palette only
rewrites the runtime style block; the active selection is kept in a
client-local key/value store and is best effort.
"""

from __future__ import annotations

import logging
import re
from collections.abc import MutableMapping
from dataclasses import dataclass

from cms.application.dtos.theme import PredefinedTheme, ThemeColors
from cms.application.interfaces.repositories import IThemeRepository
from cms.application.services.theme_presets import PRESET_THEMES, get_preset
from cms.core.constants import ACTIVE_THEME_LOCAL_KEY, THEME_STYLE_ELEMENT_ID
from cms.domain.exceptions import ResourceNotFoundException
from cms.shared.utils.generators import generate_theme_id

logger = logging.getLogger(__name__)

_UPPER_RE = re.compile(r"([A-Z])")


def _kebab(name: str) -> str:
    return _UPPER_RE.sub(r"-\1", name).lower()


def render_theme_css(colors: ThemeColors) -> str:
    """Return the :root block declaring --light-* and --dark-* custom properties."""
    lines = [":root {"]
    for mode, tokens in (("light", colors.light), ("dark", colors.dark)):
        for key, value in tokens.model_dump(by_alias=True).items():
            lines.append(f"  --{mode}-{_kebab(key)}: {value};")
    lines.append("}")
    return "\n".join(lines)


@dataclass
class RuntimeStyleBlock:
    """The page's dynamic <style> element."""

    element_id: str = THEME_STYLE_ELEMENT_ID
    css: str = ""

    def render(self) -> str:
        return f'<style id="{self.element_id}">\n{self.css}\n</style>'


class ThemeRegistry:
    """CRUD over saved themes plus client-local apply/select."""

    def __init__(
        self,
        repo: IThemeRepository,
        style_block: RuntimeStyleBlock | None = None,
        local_storage: MutableMapping[str, str] | None = None,
    ) -> None:
        self._repo = repo
        self._style_block = style_block if style_block is not None else RuntimeStyleBlock()
        self._local = local_storage if local_storage is not None else {}

    @property
    def style_block(self) -> RuntimeStyleBlock:
        return self._style_block

    async def list(self) -> list[PredefinedTheme]:
        return await self._repo.list_themes()

    def presets(self) -> list[PredefinedTheme]:
        return list(PRESET_THEMES)

    async def get(self, theme_id: str) -> PredefinedTheme:
        """Return a saved theme, or the preset with that id.

        Raises:
            ResourceNotFoundException: If neither exists.
        """
        theme = await self._repo.get_theme(theme_id)
        if theme is None:
            theme = get_preset(theme_id)
        if theme is None:
            raise ResourceNotFoundException("theme", theme_id)
        return theme

    async def save(self, name: str, colors: ThemeColors) -> PredefinedTheme:
        """Save a palette as a new theme with a fresh id."""
        theme = PredefinedTheme(id=generate_theme_id(), name=name, colors=colors)
        await self._repo.save_theme(theme)
        logger.info("Theme saved: %s (%s)", theme.name, theme.id)
        return theme

    async def update(self, theme: PredefinedTheme) -> PredefinedTheme:
        """Replace an existing saved theme wholesale.

        Raises:
            ResourceNotFoundException: If no saved theme has theme.id.
        """
        if await self._repo.get_theme(theme.id) is None:
            raise ResourceNotFoundException("theme", theme.id)
        await self._repo.save_theme(theme)
        logger.info("Theme updated: %s (%s)", theme.name, theme.id)
        return theme

    async def delete(self, theme_id: str) -> None:
        await self._repo.delete_theme(theme_id)
        if self._local.get(ACTIVE_THEME_LOCAL_KEY) == theme_id:
            self._local.pop(ACTIVE_THEME_LOCAL_KEY, None)
        logger.info("Theme deleted: %s", theme_id)

    def apply(self, colors: ThemeColors) -> str:
        """Rewrite the style block from colors. Re-applying is a no-op."""
        css = render_theme_css(colors)
        if self._style_block.css != css:
            self._style_block.css = css
        return self._style_block.css

    async def select(self, theme_id: str) -> PredefinedTheme:
        """Apply a theme and remember it as the active one."""
        theme = await self.get(theme_id)
        self.apply(theme.colors)
        self._local[ACTIVE_THEME_LOCAL_KEY] = theme.id
        return theme

    async def active_theme(self) -> PredefinedTheme | None:
        """Return the remembered theme, or None if unset or no longer available."""
        theme_id = self._local.get(ACTIVE_THEME_LOCAL_KEY)
        if not theme_id:
            return None
        try:
            return await self.get(theme_id)
        except ResourceNotFoundException:
            logger.info("Active theme %s no longer exists", theme_id)
            return None
