"""Built-in palettes offered even when no theme has been saved."""

from cms.application.dtos.theme import PredefinedTheme, ThemeColors

_DEFAULT = {
    "light": {
        "background": "40 33% 98%",
        "foreground": "20 14.3% 4.1%",
        "card": "40 33% 98%",
        "cardForeground": "20 14.3% 4.1%",
        "popover": "40 33% 98%",
        "popoverForeground": "20 14.3% 4.1%",
        "primary": "125 33% 74%",
        "primaryForeground": "125 33% 10%",
        "secondary": "210 40% 96.1%",
        "secondaryForeground": "222.2 47.4% 11.2%",
        "muted": "210 40% 96.1%",
        "mutedForeground": "215.4 16.3% 46.9%",
        "accent": "47 62% 52%",
        "accentForeground": "47 62% 5%",
        "destructive": "0 84.2% 60.2%",
        "destructiveForeground": "210 40% 98%",
        "border": "214.3 31.8% 91.4%",
        "input": "214.3 31.8% 91.4%",
        "ring": "125 33% 74%",
    },
    "dark": {
        "background": "140 15% 5%",
        "foreground": "140 5% 95%",
        "card": "140 10% 8%",
        "cardForeground": "140 5% 95%",
        "popover": "140 10% 8%",
        "popoverForeground": "140 5% 95%",
        "primary": "150 40% 45%",
        "primaryForeground": "150 40% 95%",
        "secondary": "140 10% 12%",
        "secondaryForeground": "140 5% 95%",
        "muted": "140 10% 12%",
        "mutedForeground": "140 5% 64.9%",
        "accent": "140 10% 15%",
        "accentForeground": "140 5% 95%",
        "destructive": "0 63% 31%",
        "destructiveForeground": "0 0% 95%",
        "border": "140 10% 15%",
        "input": "140 10% 15%",
        "ring": "150 40% 45%",
    },
}


def _palette(
    bg: str,
    fg: str,
    primary: str,
    primary_fg: str,
    secondary: str,
    muted_fg: str,
    accent: str,
    accent_fg: str,
    destructive: str,
    destructive_fg: str,
    border: str,
    card: str,
) -> dict[str, str]:
    """Token set where card/popover share a surface and secondary == muted."""
    return {
        "background": bg,
        "foreground": fg,
        "card": card,
        "cardForeground": fg,
        "popover": card,
        "popoverForeground": fg,
        "primary": primary,
        "primaryForeground": primary_fg,
        "secondary": secondary,
        "secondaryForeground": fg,
        "muted": secondary,
        "mutedForeground": muted_fg,
        "accent": accent,
        "accentForeground": accent_fg,
        "destructive": destructive,
        "destructiveForeground": destructive_fg,
        "border": border,
        "input": border,
        "ring": primary,
    }


_SUNSET = {
    "light": _palette(
        "30 100% 97%", "20 15% 20%", "15 90% 65%", "0 0% 100%", "30 90% 90%",
        "20 15% 40%", "330 80% 70%", "330 20% 15%", "0 84.2% 60.2%", "0 0% 100%",
        "30 50% 85%", "30 100% 97%",
    ),
    "dark": _palette(
        "270 50% 15%", "300 30% 95%", "35 90% 60%", "20 20% 5%", "260 40% 20%",
        "300 30% 70%", "350 90% 65%", "350 20% 10%", "0 70% 50%", "0 0% 100%",
        "260 40% 25%", "270 50% 15%",
    ),
}

_OCEANIC = {
    "light": _palette(
        "210 100% 98%", "220 40% 10%", "200 80% 60%", "220 50% 5%", "210 90% 90%",
        "215 20% 45%", "190 70% 75%", "190 30% 15%", "0 84.2% 60.2%", "0 0% 100%",
        "210 50% 85%", "210 100% 98%",
    ),
    "dark": _palette(
        "220 40% 5%", "210 30% 95%", "190 70% 55%", "190 20% 10%", "220 40% 12%",
        "210 30% 70%", "200 80% 60%", "200 20% 5%", "0 63% 31%", "0 0% 100%",
        "220 40% 15%", "220 40% 8%",
    ),
}

_FOREST = {
    "light": _palette(
        "110 30% 97%", "120 25% 15%", "120 40% 40%", "110 50% 98%", "110 20% 90%",
        "120 15% 40%", "100 35% 60%", "100 20% 10%", "0 84.2% 60.2%", "0 0% 100%",
        "110 20% 85%", "110 30% 97%",
    ),
    "dark": _palette(
        "120 25% 8%", "110 30% 95%", "110 35% 55%", "110 15% 10%", "120 20% 12%",
        "110 30% 70%", "90 40% 50%", "90 15% 95%", "0 70% 40%", "0 0% 100%",
        "120 20% 15%", "120 25% 10%",
    ),
}

_SLATE = {
    "light": _palette(
        "220 20% 98%", "220 15% 20%", "225 30% 50%", "220 30% 98%", "220 15% 94%",
        "220 10% 45%", "215 25% 65%", "215 20% 10%", "0 84.2% 60.2%", "0 0% 100%",
        "220 15% 88%", "220 20% 98%",
    ),
    "dark": _palette(
        "220 15% 10%", "210 20% 95%", "215 25% 55%", "215 15% 98%", "220 15% 15%",
        "210 20% 70%", "225 30% 40%", "225 15% 95%", "0 63% 31%", "0 0% 100%",
        "220 15% 20%", "220 15% 12%",
    ),
}

PRESET_THEMES: tuple[PredefinedTheme, ...] = tuple(
    PredefinedTheme(id=theme_id, name=name, colors=ThemeColors.model_validate(colors))
    for theme_id, name, colors in (
        ("default", "Default", _DEFAULT),
        ("sunset", "Sunset", _SUNSET),
        ("oceanic", "Oceanic", _OCEANIC),
        ("forest", "Forest", _FOREST),
        ("slate", "Slate", _SLATE),
    )
)

DEFAULT_THEME = PRESET_THEMES[0]


def get_preset(theme_id: str) -> PredefinedTheme | None:
    for theme in PRESET_THEMES:
        if theme.id == theme_id:
            return theme
    return None
