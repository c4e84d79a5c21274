"""Terminal weather lookup: current conditions and a 5-day forecast."""
import argparse
import logging
import os
import signal
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from geolocation import DEFAULT_GEO_URL, GeolocatorBase, IpGeolocator, StaticGeolocator
from layout import render_app
from openweather_provider import OpenWeatherProvider
from weather_app import WeatherApp
from weather_data import Units
from weather_service import WeatherService

PROMPT = "city> "
HELP_TEXT = (
    "Type a city name to search.\n"
    "  /here              use my location\n"
    "  /units metric|imperial, /c, /f   switch units\n"
    "  /quit              exit"
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weather-forecast", description="Current weather and 5-day forecast (interactive unless --city or --here is given)")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--city", help="Look up a city once and exit")
    target.add_argument("--here", action="store_true", help="Look up the current position once and exit")
    parser.add_argument("--units", choices=[u.value for u in Units], default=Units.METRIC.value)
    parser.add_argument("--lang", default=None, help="Description language (default: WEATHER_LANG or en)")
    parser.add_argument("--no-geolocation", action="store_true", help="Disable 'use my location'")
    parser.add_argument("--geo-url", default=DEFAULT_GEO_URL, help="IP geolocation endpoint")
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config() -> Tuple[str, Optional[float], Optional[float], str]:
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")
    lang = os.getenv("WEATHER_LANG", "en")

    if not api_key:
        raise SystemExit("Missing WEATHER_API_KEY in environment")

    lat_val = lon_val = None
    if lat or lon:
        if not lat or not lon:
            raise SystemExit("WEATHER_LAT and WEATHER_LON must be set together")
        try:
            lat_val = float(lat)
            lon_val = float(lon)
        except ValueError as exc:
            raise SystemExit(f"Invalid coordinates: {exc}") from exc

    logging.info("Configuration loaded: lang=%s fixed position=%s", lang, lat_val is not None)
    return api_key, lat_val, lon_val, lang


def build_geolocator(lat: Optional[float], lon: Optional[float], args: argparse.Namespace) -> Optional[GeolocatorBase]:
    if args.no_geolocation:
        logging.info("Geolocation disabled")
        return None
    if lat is not None and lon is not None:
        return StaticGeolocator(lat, lon)
    return IpGeolocator(url=args.geo_url, timeout=args.timeout)


def build_app(api_key: str, lang: str, geolocator: Optional[GeolocatorBase], args: argparse.Namespace) -> WeatherApp:
    provider = OpenWeatherProvider(api_key=api_key, lang=lang, timeout=args.timeout)
    service = WeatherService(provider)
    app = WeatherApp(service, geolocator=geolocator, units=Units(args.units))
    logging.info("Weather app ready (units=%s)", args.units)
    return app


def handle_command(app: WeatherApp, line: str) -> bool:
    """
    Apply one line of interactive input to the app.

    Returns:
        False when the user asked to quit, True otherwise
    """
    text = line.strip()
    if text in ("/quit", "/exit", "/q"):
        return False
    if text == "/help":
        print(HELP_TEXT)
        return True
    if text == "/here":
        app.use_my_location()
    elif text == "/c":
        app.toggle_units(Units.METRIC)
    elif text == "/f":
        app.toggle_units(Units.IMPERIAL)
    elif text.startswith("/units"):
        parts = text.split()
        if len(parts) != 2 or parts[1] not in [u.value for u in Units]:
            print("Usage: /units metric|imperial")
            return True
        app.toggle_units(Units(parts[1]))
    elif text.startswith("/"):
        print(f"Unknown command: {text}")
        return True
    elif not text:
        return True
    else:
        # Forward the raw text as typed
        app.submit(line.rstrip("\n"))
    print(render_app(app))
    return True


def run_interactive(app: WeatherApp) -> None:
    print(HELP_TEXT)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if not handle_command(app, line):
            break


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    api_key, lat, lon, lang = load_config()

    geolocator = build_geolocator(lat, lon, args)
    app = build_app(api_key, args.lang or lang, geolocator, args)

    if args.city is not None:
        app.submit(args.city)
        print(render_app(app))
        return 1 if app.error else 0
    if args.here:
        app.use_my_location()
        print(render_app(app))
        return 1 if app.error else 0

    signal.signal(signal.SIGTERM, signal_handler)
    try:
        run_interactive(app)
    except KeyboardInterrupt:
        logging.info("Stopping")
    return 0


if __name__ == "__main__":
    sys.exit(main())
