import argparse

import uvicorn

from apology_generator.config import load_config
from apology_generator.server import create_app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="apology-generator", description="Serve the AI apology generator.")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--host", help="Override the bind host")
    parser.add_argument("--port", type=int, help="Override the bind port")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port

    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
