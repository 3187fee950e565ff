"""Allow ``python -m json_inspector``."""

from json_inspector.cli import main

raise SystemExit(main())
