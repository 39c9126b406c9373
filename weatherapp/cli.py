"""CLI entry point for the weather lookup client."""

import argparse
import logging
import sys
from dataclasses import replace

from weatherapp.app.controller import AppController
from weatherapp.config.loader import get_config_value, load_config
from weatherapp.config.schema import AppConfig
from weatherapp.forecast.units import unit_symbol
from weatherapp.ingest.forecast_fetcher import ForecastFetcher
from weatherapp.ingest.owm_client import OpenWeatherClient, OpenWeatherClientError
from weatherapp.models.state import AppState, ViewStatus
from weatherapp.reporting.formatters import format_view_json, format_view_text
from weatherapp.storage.preference_store import PreferenceStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Single-screen weather forecast lookup",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite preferences DB path")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings only")

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Fetch and print the forecast")
    show_p.add_argument("--city", default=None, help="City to look up")

    # interactive
    sub.add_parser("interactive", help="Interactive forecast screen")

    # unit toggle
    unit_p = sub.add_parser("unit", help="Temperature unit preference")
    unit_sub = unit_p.add_subparsers(dest="unit_command")
    unit_sub.add_parser("toggle", help="Switch between °C and °F")

    # prefs
    sub.add_parser("prefs", help="Show stored preferences")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print a config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    if args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "interactive":
        return _cmd_interactive(config, args)
    elif args.command == "unit":
        return _cmd_unit(config, args)
    elif args.command == "prefs":
        return _cmd_prefs(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _build_controller(config: AppConfig, store: PreferenceStore) -> AppController:
    client = OpenWeatherClient(
        api_key=config.api.api_key or None,
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
    )
    return AppController(
        store,
        ForecastFetcher(client),
        hourly_window=config.display.hourly_window,
    )


def _render(state: AppState, config: AppConfig, as_json: bool) -> str:
    if as_json:
        return format_view_json(state, hourly=config.display.hourly_window)
    return format_view_text(state, hourly=config.display.hourly_window)


def _cmd_show(config: AppConfig, args) -> int:
    store = PreferenceStore.open(config.storage.db_path)
    try:
        controller = _build_controller(config, store)
    except OpenWeatherClientError as e:
        print(f"Error: {e}")
        store.close()
        return 1

    controller.start(args.city)

    state = controller.state
    print(_render(state, config, args.json))
    store.close()
    return 0 if state.view.status == ViewStatus.READY else 1


def _cmd_interactive(config: AppConfig, args) -> int:
    store = PreferenceStore.open(config.storage.db_path)
    try:
        controller = _build_controller(config, store)
    except OpenWeatherClientError as e:
        print(f"Error: {e}")
        store.close()
        return 1

    def on_change(state: AppState) -> None:
        if state.view.status == ViewStatus.LOADING:
            print("Loading...")

    unsubscribe = controller.subscribe(on_change)
    controller.start()
    print(_render(controller.state, config, args.json))
    print("Enter a city, :r to refresh, :u to switch units, :q to quit.")

    for line in sys.stdin:
        text = line.strip()
        if not text:
            continue
        if text == ":q":
            break
        if text == ":r":
            controller.refresh()
        elif text == ":u":
            controller.toggle_unit()
        elif text == controller.state.city:
            controller.refresh()
        else:
            controller.change_city(text)
        print(_render(controller.state, config, args.json))

    unsubscribe()
    store.close()
    return 0


def _cmd_unit(config: AppConfig, args) -> int:
    if args.unit_command != "toggle":
        print("Use: unit toggle")
        return 1
    store = PreferenceStore.open(config.storage.db_path)
    prefs = store.load()
    prefs = replace(prefs, use_celsius=not prefs.use_celsius)
    store.save(prefs)
    store.close()
    print(f"Units: °{unit_symbol(prefs.use_celsius)}")
    return 0


def _cmd_prefs(config: AppConfig, args) -> int:
    store = PreferenceStore.open(config.storage.db_path)
    prefs = store.load()
    store.close()
    print(f"City: {prefs.city}")
    print(f"Units: °{unit_symbol(prefs.use_celsius)}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get KEY")
    return 1
