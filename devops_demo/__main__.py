"""Process entrypoint: `python -m devops_demo` or the `devops-demo` script."""

import sys

from .main import app
from .server import serve


def main() -> None:
    # Importing .main already loaded .env files and configured logging.
    sys.exit(serve(app.state.settings, app))


if __name__ == "__main__":
    main()
