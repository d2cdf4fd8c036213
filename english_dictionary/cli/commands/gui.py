"""CLI command that launches the desktop window."""


def gui_command(args) -> int:
    """Execute the gui subcommand.

    PyQt6 is imported lazily so that console lookups work without a display.

    Returns:
        Exit code of the Qt event loop
    """
    from english_dictionary.gui.app import run

    return run()
