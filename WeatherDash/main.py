"""Command-line entry point: run the weather proxy or the terminal dashboard."""
import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from display import render_text
from openweather_provider import DEFAULT_MAX_AGE_SECONDS, OpenWeatherProvider
from presenter import WeatherPresenter
from proxy_client import DEFAULT_PROXY_URL, ProxyClient
from weather_provider import MisconfiguredCredential
from weather_proxy import DEFAULT_CITY, create_app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weatherdash", description="City weather proxy and dashboard")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the weather proxy")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--max-age", type=int, default=DEFAULT_MAX_AGE_SECONDS,
                       help="Freshness hint in seconds")

    show = commands.add_parser("show", help="Print the weather for one city")
    show.add_argument("--city", default=None)
    show.add_argument("--proxy-url", default=None)

    dashboard = commands.add_parser("dashboard", help="Interactive search prompt")
    dashboard.add_argument("--proxy-url", default=None)
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_api_key() -> str:
    load_dotenv()
    api_key = os.getenv("OPENWEATHER_API_KEY")
    if not api_key:
        raise SystemExit("Missing OPENWEATHER_API_KEY in environment")
    return api_key


def default_city() -> str:
    return os.getenv("WEATHER_DEFAULT_CITY") or DEFAULT_CITY


def build_provider(args: argparse.Namespace) -> OpenWeatherProvider:
    try:
        provider = OpenWeatherProvider(
            api_key=load_api_key(),
            lang=os.getenv("WEATHER_LANG", "en"),
            timeout=args.timeout,
            max_age_seconds=args.max_age,
        )
    except MisconfiguredCredential as exc:
        raise SystemExit(f"Invalid OPENWEATHER_API_KEY: {exc}") from exc
    logging.info("OpenWeather provider ready (timeout=%ss, max-age=%ss)", args.timeout, args.max_age)
    return provider


def build_presenter(args: argparse.Namespace) -> WeatherPresenter:
    load_dotenv()
    proxy_url = args.proxy_url or os.getenv("WEATHER_PROXY_URL", DEFAULT_PROXY_URL)
    client = ProxyClient(base_url=proxy_url, timeout=args.timeout)
    logging.info("Using weather proxy at %s", proxy_url)
    return WeatherPresenter(
        client,
        default_city=default_city(),
        notify=lambda message: print(f"! {message}", file=sys.stderr),
    )


def run_serve(args: argparse.Namespace) -> None:
    provider = build_provider(args)
    app = create_app(provider, default_city=default_city(), max_age_seconds=args.max_age)
    logging.info("Serving weather proxy on %s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port)


def run_show(args: argparse.Namespace) -> int:
    presenter = build_presenter(args)
    if args.city:
        presenter.search(args.city)
    else:
        presenter.mount()
    print(render_text(presenter))
    return 0 if presenter.error is None else 1


def run_dashboard(args: argparse.Namespace, stdin=None) -> None:
    stdin = stdin or sys.stdin
    presenter = build_presenter(args)
    presenter.mount()
    print(render_text(presenter))
    while True:
        print("\nSearch city (Ctrl-D to quit): ", end="", flush=True)
        line = stdin.readline()
        if not line:
            break
        if presenter.search(line):
            print(render_text(presenter))


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        if args.command == "serve":
            run_serve(args)
        elif args.command == "show":
            sys.exit(run_show(args))
        elif args.command == "dashboard":
            run_dashboard(args)
    except KeyboardInterrupt:
        logging.info("Stopping")


if __name__ == "__main__":
    main()
