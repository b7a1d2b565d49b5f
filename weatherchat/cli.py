"""CLI entry point for the weather chat assistant."""

import argparse
import logging
import sys

from weatherchat.chat.session import build_session
from weatherchat.config.loader import (
    get_config_value,
    load_config,
    redacted_dump,
    set_config_value,
)
from weatherchat.ingest.openweather_client import OpenWeatherClient, WeatherClientError
from weatherchat.ingest.probability_client import ProbabilityClient
from weatherchat.parsing.query_parser import parse_weather_query
from weatherchat.reporting.formatters import (
    format_locations_text,
    format_message,
    format_probability_text,
    format_snapshot_json,
    format_snapshot_text,
)

QUIT_COMMANDS = {"/quit", "/exit", "quit", "exit"}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherchat",
        description="Conversational weather assistant",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )

    sub = parser.add_subparsers(dest="command")

    # chat / ask
    chat_p = sub.add_parser("chat", help="Interactive weather chat")
    chat_p.add_argument("--location", default=None, help="Starting location")
    ask_p = sub.add_parser("ask", help="Ask a single question")
    ask_p.add_argument("text", nargs="+", help="Question text")

    # provider lookups
    current_p = sub.add_parser("current", help="Current weather for a city")
    current_p.add_argument("city")
    current_p.add_argument("--country", default=None)
    current_p.add_argument("--json", action="store_true", help="JSON output")

    forecast_p = sub.add_parser("forecast", help="Daily forecast for a city")
    forecast_p.add_argument("city")
    forecast_p.add_argument("--country", default=None)
    forecast_p.add_argument("--days", type=int, default=None)
    forecast_p.add_argument("--json", action="store_true", help="JSON output")

    coords_p = sub.add_parser("coords", help="Current weather at coordinates")
    coords_p.add_argument("lat", type=float)
    coords_p.add_argument("lon", type=float)
    coords_p.add_argument("--json", action="store_true", help="JSON output")

    search_p = sub.add_parser("search", help="Search locations by name")
    search_p.add_argument("query")
    search_p.add_argument("--limit", type=int, default=None)

    prob_p = sub.add_parser(
        "probability", help="Weather event probability, e.g. 'rain in pune tomorrow'"
    )
    prob_p.add_argument("text", nargs="+")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP chat API")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "chat":
        return _cmd_chat(config, args)
    elif args.command == "ask":
        return _cmd_ask(config, args)
    elif args.command in ("current", "forecast", "coords", "search"):
        return _cmd_lookup(config, args)
    elif args.command == "probability":
        return _cmd_probability(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_chat(config, args) -> int:
    session = build_session(
        config,
        location=args.location,
        on_location_change=lambda loc: print(f"(location: {loc})"),
    )
    print(format_message(session.messages[0]))
    while True:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if text.strip().lower() in QUIT_COMMANDS:
            return 0
        reply = session.send(text)
        if reply is None:
            continue
        print(format_message(reply))
        if session.error:
            print(f"Error: {session.error}", file=sys.stderr)


def _cmd_ask(config, args) -> int:
    session = build_session(config)
    reply = session.send(" ".join(args.text))
    if reply is None:
        print("Error: empty question")
        return 1
    print(reply.text)
    return 0 if session.error is None else 1


def _cmd_lookup(config, args) -> int:
    client = OpenWeatherClient(config.openweather)
    try:
        if args.command == "search":
            limit = args.limit or config.defaults.search_limit
            print(format_locations_text(client.search_locations(args.query, limit)))
            return 0
        if args.command == "current":
            snapshot = client.get_current(args.city, args.country)
        elif args.command == "forecast":
            days = args.days or config.defaults.forecast_days
            snapshot = client.get_forecast(args.city, args.country, days)
        else:
            snapshot = client.get_by_coordinates(args.lat, args.lon)
    except WeatherClientError as e:
        print(f"Error: {e}")
        return 1
    print(format_snapshot_json(snapshot) if args.json else format_snapshot_text(snapshot))
    return 0


def _cmd_probability(config, args) -> int:
    text = " ".join(args.text)
    parsed = parse_weather_query(text)
    if parsed is None:
        print("Error: could not find a location and a date in the question")
        return 1
    result = ProbabilityClient(config.probability).fetch(parsed)
    print(format_probability_text(result))
    return 0 if result.success else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherchat.dashboard import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
