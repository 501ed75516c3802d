"""Command line interface for the LexCora assistant."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, TextIO

from lexcora_assistant import __version__
from lexcora_assistant.config import load_config
from lexcora_assistant.domain.errors import ConfigError
from lexcora_assistant.domain.models import ChatMessage, Language, Role
from lexcora_assistant.logging import configure_logging, get_logger, get_run_id
from lexcora_assistant.services import answer_service, chat_service, health_service
from lexcora_assistant.services.credentials import load_gate

logger = get_logger(__name__)

EXIT_COMMANDS = {"/exit", "/quit"}


def _print_json(payload: dict, stream: Optional[TextIO] = None) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False), file=stream or sys.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LexCora legal assistant CLI")
    parser.add_argument("--version", action="version", version=f"lexcora-assistant {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    ask_parser = subparsers.add_parser("ask", help="Ask a single legal question")
    ask_parser.add_argument("question", help="Question to ask")
    ask_parser.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    ask_parser.add_argument("--timeout", type=float, help="Provider timeout in seconds")
    ask_parser.set_defaults(func=_ask_handler)

    chat_parser = subparsers.add_parser("chat", help="Chat with the assistant, one message per stdin line")
    chat_parser.add_argument("--lang", choices=[lang.value for lang in Language], default="en")
    chat_parser.add_argument("--history", help="JSON file with prior turns [{role, text}, ...]")
    chat_parser.add_argument("--timeout", type=float, help="Provider timeout per message in seconds")
    chat_parser.set_defaults(func=_chat_handler)

    doctor_parser = subparsers.add_parser("doctor", help="Check credentials, instructions and provider settings")
    doctor_parser.set_defaults(func=_doctor_handler)

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        config = load_config()
    except ConfigError as exc:
        _print_json({"error": str(exc)}, sys.stderr)
        sys.exit(2)
    configure_logging(config.logging.level)
    logger.info("Starting CLI", extra={"run_id": get_run_id(), "command": args.command, "env": config.app.environment})
    args.func(args)


def _ask_handler(args: argparse.Namespace) -> None:
    cfg = load_config()
    gate = load_gate(cfg)
    response = asyncio.run(answer_service.answer(args.question, args.lang, gate=gate, config=cfg, timeout_s=args.timeout))
    _print_json({"language": args.lang, **response.to_dict()})


def _load_history(path: Optional[str]) -> list[ChatMessage]:
    if not path:
        return []
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [ChatMessage(role=Role(item["role"]), text=item["text"]) for item in raw]


async def _chat_loop(session: chat_service.LegalChatSession, lines: TextIO, timeout_s: Optional[float]) -> int:
    turns = 0
    while True:
        line = await asyncio.to_thread(lines.readline)
        if not line:
            break
        message = line.strip()
        if not message:
            continue
        if message in EXIT_COMMANDS:
            break
        response = await chat_service.send_message(session, message, timeout_s=timeout_s)
        turns += 1
        _print_json({"turn": turns, "mode": session.mode, **response.to_dict()})
    return turns


def _chat_handler(args: argparse.Namespace) -> None:
    cfg = load_config()
    try:
        history = _load_history(args.history)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        _print_json({"error": f"Could not read history: {exc}"}, sys.stderr)
        sys.exit(1)
    session = chat_service.create_session(args.lang, history, gate=load_gate(cfg), config=cfg)
    asyncio.run(_chat_loop(session, sys.stdin, args.timeout))


def _doctor_handler(args: argparse.Namespace) -> None:
    cfg = load_config()
    results = health_service.run_all_checks(cfg)
    _print_json(results)
    if not all(check.get("ok") for check in results.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
