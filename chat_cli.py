"""Interactive chat loop: line editor with history, `commands`, one completion per turn."""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from ata.errors import AtaError
from ata.schemas import Config
from ata.shortcuts import print_shortcuts
from openai_client import get_client, prompt_model

BANNER = "Ask the Terminal Anything. Type `commands` for a list of commands."
COMMANDS_KEYWORD = "commands"

logger = logging.getLogger(__name__)


def make_session() -> PromptSession:
    """Line editor with in-memory history (lost at exit)."""
    return PromptSession(history=InMemoryHistory())


def run_chat(
    config: Config,
    *,
    client: OpenAI | None = None,
    session: Any = None,
) -> None:
    """
    Run the interactive chat loop until Ctrl-C / Ctrl-D.
    Failed turns (network, unparsable reply) print an error and return to the prompt.
    """
    client = client or get_client(config)
    session = session or make_session()
    label = f"{config.model}> "

    print(BANNER)

    while True:
        try:
            line = session.prompt(label)
        except (KeyboardInterrupt, EOFError):
            break
        except OSError as e:
            print(f"Error: {e}")
            break

        if line == "":
            continue
        if line.strip() == COMMANDS_KEYWORD:
            print_shortcuts()
            continue

        try:
            text = prompt_model(client, config, line)
        except KeyboardInterrupt:
            break
        except AtaError as e:
            logger.debug("turn failed", exc_info=True)
            print(f"\nError: {e}\n")
            continue

        print(f"\n{text}\n")
