"""CLI command for looking up a single word."""

from dataclasses import replace

from english_dictionary.cli.console_view import ConsoleView
from english_dictionary.cli.url_audio_player import UrlAudioPlayer
from english_dictionary.config import ConfigManager
from english_dictionary.controller import ImmediateScheduler, LookupController
from english_dictionary.presenters import ConsolePresenter
from english_dictionary.services import FreeDictionaryProvider


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = ConfigManager.load_config()
    if args.timeout is not None:
        config = replace(config, request_timeout=args.timeout)

    provider = FreeDictionaryProvider(config.api_url, timeout=config.request_timeout)
    view = ConsoleView()
    controller = LookupController(
        config=config,
        scheduler=ImmediateScheduler(provider),
        presenter=ConsolePresenter(),
        audio_player=UrlAudioPlayer(),
        view=view,
    )

    if not controller.handle_submit({"word": " ".join(args.word)}):
        return 1

    if not controller.state.result_visible:
        return 1

    if args.play:
        controller.play_pronunciation()

    return 0
