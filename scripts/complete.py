#!/usr/bin/env python3
"""CLI helper: request one chat completion from the configured endpoint.

Usage: python scripts/complete.py USER_PROMPT [SYSTEM_PROMPT]

Endpoint settings come from OPENAI_API_BASE, OPENAI_API_KEY and
OPENAI_API_MODEL (see config/default.yaml). Prints the reply content, or the
function call as JSON when the model asks for one.
"""
import json
import sys

from config_manager import ConfigManager
from logging_manager import get_logger, setup_logging
from providers import CompletionClient, CompletionError

DEFAULT_SYSTEM = "You are a helpful assistant."


def usage():
    print(__doc__)


def main(argv, manager=None):
    if len(argv) < 2:
        usage(); return 1
    user = argv[1]
    system = argv[2] if len(argv) > 2 else DEFAULT_SYSTEM

    manager = manager or ConfigManager()
    try:
        cfg = manager.load_config()
        setup_logging(cfg.logging)
        log = get_logger()
        log.debug("Configuration loaded", **manager.get_config_summary(cfg))

        client = CompletionClient(cfg.openai, log=log)
        msg = client.complete(system, user)
    except CompletionError as e:
        print(f'completion failed: {e}', file=sys.stderr)
        return 2

    if msg.function_call is not None:
        print(json.dumps(msg.function_call.model_dump()))
    else:
        print(msg.content or '')
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
