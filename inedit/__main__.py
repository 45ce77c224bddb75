"""inedit CLI entry point.

Allows running via `python -m inedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from importlib import metadata

USAGE = ("usage: inedit [--style plain|classic|fancy] [--full] [--keytest] [--save-settings]"
         " [--log-file PATH] [--version] [FILE]")


def get_version_string() -> str:
    try:
        return metadata.version("inedit")
    except metadata.PackageNotFoundError:
        return "unknown"


def parse_args(args: list[str]) -> dict:
    """Very small arg parsing: flags, one optional filename."""
    options: dict = {"style": None, "full": False, "keytest": False, "log_file": None,
                     "save_settings": False, "version": False, "filename": None}
    it = iter(args)
    for arg in it:
        if arg in ("--version", "-V"):
            options["version"] = True
        elif arg in ("--keytest", "--keyboard-test"):
            options["keytest"] = True
        elif arg == "--save-settings":
            options["save_settings"] = True
        elif arg == "--full":
            options["full"] = True
        elif arg in ("--style", "--log-file"):
            value = next(it, None)
            if value is None:
                raise SystemExit(USAGE)
            options[arg[2:].replace("-", "_")] = value
        elif arg.startswith("-"):
            raise SystemExit(USAGE)
        else:
            options["filename"] = arg
    return options


def main() -> None:
    options = parse_args(sys.argv[1:])
    if options["version"]:
        print(get_version_string())
        return
    if options["log_file"]:
        logging.basicConfig(filename=options["log_file"], level=logging.DEBUG)

    # Lazy import to avoid importing UI deps for --version
    from .clipboard import Clipboard
    from .commands import CommandRegistry, DebugKeybinding
    from .editor import Editor, EditorConfig
    from .errors import InEditError
    from .settings import SettingsStore
    from .styles import Style

    store = SettingsStore()
    settings = store.load()
    if options["style"]:
        settings.style = options["style"]
    if options["full"]:
        settings.lazy = False

    initial_text = ""
    if options["filename"]:
        try:
            with open(options["filename"], encoding="utf-8") as f:
                initial_text = f.read()
        except OSError as e:
            print(f"inedit: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        style = Style.from_name(
            settings.style,
            header_message=settings.header_message,
            gutter_message=settings.gutter_message,
        )
        if options["save_settings"] and not store.save(settings):
            print(f"inedit: could not save settings to {store.path}", file=sys.stderr)
        config = EditorConfig(
            initial_text=initial_text,
            lazy=settings.lazy,
            keybinding=(DebugKeybinding() if options["keytest"]
                        else CommandRegistry(settings.tab_width, Clipboard(settings.system_clipboard))),
            tab_width=settings.tab_width,
        ).with_style(style)
        result = Editor(config).read()
    except InEditError as e:
        print(f"inedit: {e}", file=sys.stderr)
        sys.exit(1)
    print(result)


if __name__ == "__main__":  # pragma: no cover
    main()
