import argparse
import logging
import sys

import uvicorn

from pokedex.config import ConfigError, load_settings
from pokedex.logging_config import setup_logging
from pokedex.main import create_app

log = logging.getLogger("pokedex")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="A simple Pokemon server that gives minimal information")
    ap.add_argument("--config", help="YAML file with poke_api / translation_api settings")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    args = ap.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"[pokedex] {e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level)
    log.info(f"Starting Pokedex gateway on {args.host}:{args.port}")
    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
