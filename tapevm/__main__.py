from __future__ import annotations

from tapevm.cli import main

raise SystemExit(main())
