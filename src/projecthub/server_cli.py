"""CLI entry point for the ProjectHub API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="projecthub-server",
        description="ProjectHub API server",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: SQLite database, console logs",
    )
    args = parser.parse_args(argv)

    if args.local:
        os.environ["PROJECTHUB_LOCAL_MODE"] = "1"
        os.environ.setdefault("PROJECTHUB_SESSION_COOKIE_SECURE", "0")

    import uvicorn

    uvicorn.run("projecthub.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
