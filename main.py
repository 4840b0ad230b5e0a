"""Sentinels Setup: launcher. Runs the CLI, or serves the web app with --serve."""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "8080")


def main():
    parser = argparse.ArgumentParser(description="Sentinels Setup launcher", add_help=False)
    parser.add_argument("--serve", action="store_true",
                        help="Serve the web app instead of running the CLI")
    parser.add_argument("--reload", action="store_true",
                        help="Reload the web app on code changes (with --serve)")
    args, rest = parser.parse_known_args()

    if not args.serve:
        from sentinels_setup.cli import main as cli_main
        sys.exit(cli_main(rest))

    import uvicorn

    print(f"Starting web app on http://localhost:{PORT} ...")
    uvicorn.run("backend.app:app", host=HOST, port=int(PORT), reload=args.reload)


if __name__ == "__main__":
    main()
