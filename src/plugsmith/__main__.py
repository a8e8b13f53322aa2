"""Allow ``python -m plugsmith``."""

from plugsmith.cli import main

raise SystemExit(main())
