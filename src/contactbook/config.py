"""Configuration and user preferences for contactbook."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONTACTBOOK_HOME = Path(os.environ.get("CONTACTBOOK_HOME", Path.home() / "contactbook"))
CONFIG_FILE = CONTACTBOOK_HOME / "config" / "contactbook.conf"
DATA_DIR = CONTACTBOOK_HOME / "data"
DEFAULT_ADDRESS_BOOK_FILE = DATA_DIR / "addressbook.json"


@dataclass
class GuiSettings:
    """Window geometry remembered between sessions."""

    window_width: int = 740
    window_height: int = 600
    window_x: int | None = None
    window_y: int | None = None


@dataclass
class Config:
    """contactbook configuration."""

    address_book_file: str = ""
    gui_settings: GuiSettings = field(default_factory=GuiSettings)

    @property
    def address_book_file_path(self) -> Path:
        return address_book_path(self)


def address_book_path(config: Config) -> Path:
    """Resolve the address book file from config, falling back to the data dir."""
    if config.address_book_file:
        return Path(config.address_book_file).expanduser()
    return DEFAULT_ADDRESS_BOOK_FILE


def _parse_int(key: str, value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {key.upper()}: {value!r}")
        return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from contactbook.conf file."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "address_book_file":
                config.address_book_file = value
            case "window_width" | "window_height":
                number = _parse_int(key, value)
                if number is not None:
                    setattr(config.gui_settings, key, number)
            case "window_x" | "window_y":
                setattr(config.gui_settings, key, _parse_int(key, value) if value else None)

    return config


def save_config(config: Config, path: Path | None = None) -> None:
    """Write configuration back in the format load_config reads."""
    path = path or CONFIG_FILE
    gui = config.gui_settings
    lines = [
        "# contactbook configuration",
        f'ADDRESS_BOOK_FILE = "{config.address_book_file}"',
        f"WINDOW_WIDTH = {gui.window_width}",
        f"WINDOW_HEIGHT = {gui.window_height}",
    ]
    if gui.window_x is not None:
        lines.append(f"WINDOW_X = {gui.window_x}")
    if gui.window_y is not None:
        lines.append(f"WINDOW_Y = {gui.window_y}")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n")
