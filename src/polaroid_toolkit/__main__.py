"""Allow ``python -m polaroid_toolkit``."""

from polaroid_toolkit.cli import main

raise SystemExit(main())
