"""Allow ``python -m malay_dictionary``."""

from __future__ import annotations

import sys

from malay_dictionary.cli import main

sys.exit(main())
