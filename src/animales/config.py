from __future__ import annotations
import argparse, os

DEFAULT_BASE_URL = "https://698a05f7c04d974bc6a11fd5.mockapi.io"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Animales CRUD client")
    p.add_argument("--base-url", default=os.getenv("API_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--resource", default=os.getenv("API_RESOURCE_PATH", "/animales"))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    p.add_argument("--message-ttl", type=float, default=float(os.getenv("MESSAGE_TTL", "3")))
    p.add_argument("--path", default="/animales", help="start route, e.g. /animales/crear")
    return p

def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
